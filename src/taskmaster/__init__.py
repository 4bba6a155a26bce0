"""TaskMaster - interactive in-memory console task manager."""
