"Observers are notified about route requests and their outcome"

from .abstract import RouteObserver
from .simple_observer import SimpleObserver, AttemptedRoute
