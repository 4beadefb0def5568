"""Calculator API blueprints"""
