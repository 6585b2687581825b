"""
Feature modules. Each exposes a router plus its service layer.
"""
