"""
Application layer - Service wiring and events

This layer contains:
- bootstrap: ServiceContainer / initialize_services()
- events: EventBus and domain events for UI feedback
"""
