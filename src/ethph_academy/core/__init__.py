"""Core domain logic for ETHPH Academy.

Navigation tree, content catalog, tutorial rendering and the playground
state machine. Nothing here depends on the web layer.
"""
