"""
Features module - Vertical Feature Organization

Each feature module contains its related code organized by layer:
- domain/: Entities and value objects
- application/: Stores, controllers and form rules

Features:
- projects/: The project board (store, drag-and-drop, form validation)
"""
