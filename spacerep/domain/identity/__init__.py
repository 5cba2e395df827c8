"""Identity domain: user accounts and authentication rules."""
