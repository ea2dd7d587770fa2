"""Streamlit render helpers."""
