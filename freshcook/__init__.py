"""
FreshCook backend:
- ingredients: label/OCR ingredient extraction (pure, no I/O)
- vision_client: Google Cloud Vision annotate call
- services: image analysis and recipe generation
- main: FastAPI application
"""
