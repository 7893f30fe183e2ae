"""Utility helpers for ML-DSA BIP39."""
