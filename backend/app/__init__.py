"""
Basic Resource — Application Package Initializer
=================================================

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (Templates, Routes)   │  ← Rendering, route extraction
    ├─────────────────────────────────────┤
    │           Schemas (Data)            │  ← Pydantic response models
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
