"""fittrack - plan/progress state engine for a personal fitness and nutrition tracker."""

__version__ = "0.1.0"
