from .faculty import faculty_bp
from .catalog import catalog_bp

__all__ = ['faculty_bp', 'catalog_bp']
