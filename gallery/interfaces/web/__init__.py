"""HTML presentation of the gallery."""
