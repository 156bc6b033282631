"""Calculator services: token parsing, shape classification, dispatch."""
