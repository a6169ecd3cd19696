"""Web — server-rendered browser UI that talks to the REST API through ChecklistApi."""
