"""Grid-patrol simulator: patrol tracing, loop detection, obstruction search."""
