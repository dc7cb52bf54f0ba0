"""Terminal UI building blocks for gitsy."""
