"""GI REACH website backend: content-managed site, admin back-office and mentee portal."""
