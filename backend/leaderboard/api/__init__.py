"""HTTP blueprints for users and scores."""
