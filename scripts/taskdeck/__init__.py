"""
Taskdeck - terminal to-do list with a live clock and a stopwatch.

Architecture:
- providers.py: Record types and the store protocol
- rest_store.py: Store implementation over the PostgREST HTTP API
- todo_list.py: In-memory task list mirrored to the store
- timers.py: Stopwatch state and time formatting
- views/: Textual screen/widget components
- app.py: Main application entry point

Extensibility points:
1. New data sources: Implement the TodoStore protocol
2. New panels: Add to views/widgets.py, compose in views/dashboard.py
"""

__version__ = "0.1.0"
