# Schemas package (re-export feature modules for stable imports)
from .schedule.schedule import *
