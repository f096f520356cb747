# gestion_transporte/models/__init__.py

from .identification_type import *
# import every model file here
