"""recurtask - expand recurring task templates into a month of dated tasks."""
