"""API Gateway Lambda handlers for queries and upload URLs."""
