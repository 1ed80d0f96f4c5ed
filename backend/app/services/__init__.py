# Services package init
"""
Basic Resource — Services Layer
=================================

Service Inventory:
    - TemplateEngine: Loads named Jinja2 templates and builds template instances
    - route_catalog:  Extracts the application's route table and matches URLs
"""
