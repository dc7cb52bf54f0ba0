"""Services for gitsy."""
