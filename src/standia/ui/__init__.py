"""Gradio UI for Stand IA.

Modules:
- app: Blocks factory and entry point
- components: Wizard screens
- handlers: Event handlers (generation, file pickers, view rendering)
- state: Per-session state initialization
- adapters: Conversion between Gradio values and core objects
- models: UI state and view constants
"""
