"""Streamlit pages.

Modules here only render a ``Session`` and forward user actions to the
``detection`` controller; no workflow state lives in the UI layer.
"""
