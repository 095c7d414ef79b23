"""Java language server bootstrap plugin."""
