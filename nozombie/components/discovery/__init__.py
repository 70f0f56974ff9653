"""Component discovery: scan root, tree walk, name extraction."""
