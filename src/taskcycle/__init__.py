"""taskcycle - recurring task schedules exported for ClickUp import."""
