"""Core building blocks: value objects, entities, ports and exceptions."""
