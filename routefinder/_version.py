__title__ = "routefinder"
__description__ = "Shortest paths, turn-by-turn directions and place name search on road graphs"
__url__ = "https://github.com/routefinder/routefinder"
__version__ = "1.0.0"
__author__ = "routefinder developers"
__author_email__ = "routefinder@users.noreply.github.com"
__license__ = "Apache License 2.0"
