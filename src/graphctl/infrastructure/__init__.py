"""Infrastructure layer — input adapters feeding the graph model."""
