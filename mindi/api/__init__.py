"""HTTP surface and match driving."""
