"""Flujo conversacional: filtrado, clasificación y decisión."""
