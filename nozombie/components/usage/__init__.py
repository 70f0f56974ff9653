"""Usage resolution: reference matching and used/unused partition."""
