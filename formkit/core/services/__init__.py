"""Services — field factories, collections and form scaffolding."""
