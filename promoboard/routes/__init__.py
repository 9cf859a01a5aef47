"""
Routes HTTP
Blueprints publics et admin
"""
