# Routes package init
"""
Basic Resource — API Routes Package
=====================================

Route Inventory:
    - hello.py:    GET  /hello                          (static greeting)
                   GET  /hello/customer/{name}          (greeting for a customer)
                   PUT  /hello/customer/{name}/{sufix}  (greeting context as JSON)
    - catalog.py:  GET  /routes                         (route table)
                   GET  /routes/lookup                  (URL → route)
    - health.py:   GET  /health                         (service health check)

Routes stay thin: template loading and rendering live in
app.services.template_service, route extraction in app.services.route_catalog.
"""
