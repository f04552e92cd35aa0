"""
Streamlit Dashboard Application.

The desktop-style HUD front end:
- Workspace and registry import
- Multi-table seat assignment with HUD overlays
- Registry listing
- Hand-log audit

All logic lives in src/; this package only renders state and dispatches actions.
"""
