"""Field primitives, property groups and the request envelope."""
