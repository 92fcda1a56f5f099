"""Runtime layer: request chunking and the REST request pipeline."""
