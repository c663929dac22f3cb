"""
Presentation layer: Flask blueprints and HTTP error mapping.
"""
