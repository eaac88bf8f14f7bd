"""
Farm Scenario - Yield & Economic Planning Engine
Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "Farm Scenario Team"

# Core modules
from . import config
from . import params
from . import yield_model
from . import costs
from . import economics
from . import risk
from . import advisory
from . import simulation
from . import history
from . import orchestrator
from . import report

from .params import SimulationParams, ValidationError, default_params, optimized_params
from .simulation import SimulationResult, run_simulation
from .history import ComparisonHistory
from .orchestrator import ScenarioOrchestrator

__all__ = [
    # Modules
    'config', 'params', 'yield_model', 'costs', 'economics', 'risk',
    'advisory', 'simulation', 'history', 'orchestrator', 'report',
    # Engine
    'SimulationParams', 'ValidationError', 'default_params', 'optimized_params',
    'SimulationResult', 'run_simulation', 'ComparisonHistory', 'ScenarioOrchestrator',
]
