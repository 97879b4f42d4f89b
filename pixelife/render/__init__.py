"""Frame buffer rendering."""
