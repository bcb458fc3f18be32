__version__ = "0.1.0"
__description__ = "Client for JSON:API services with typed resources"
