"""
Main application package for the Poker HUD dashboard.

This is the UI-free core providing:
- Player registry models and import validation
- Table / seat assignment
- Explicit state store with action handlers
- AI insight agents (Grok)

It is consumed by the Streamlit dashboard (streamlit_app/).
"""

__version__ = "0.1.0"
