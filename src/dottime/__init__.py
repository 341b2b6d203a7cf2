"""dottime — dot-grid view of the days and years you have left."""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from dottime.config.defaults import default_preferences as default_preferences
from dottime.config.schema import NotificationSettings as NotificationSettings
from dottime.config.schema import Preferences as Preferences
from dottime.core.grid import GridLayout as GridLayout
from dottime.core.grid import grid_layout as grid_layout
from dottime.core.timecalc import LIFE_EXPECTANCY_YEARS as LIFE_EXPECTANCY_YEARS
from dottime.core.timecalc import VIEW_MODES as VIEW_MODES
from dottime.core.timecalc import DotCell as DotCell
from dottime.core.timecalc import TimeData as TimeData
from dottime.core.timecalc import ViewMode as ViewMode
from dottime.core.timecalc import compute_time_data as compute_time_data
from dottime.core.timecalc import current_unit_index as current_unit_index
from dottime.core.timecalc import generate_dot_cells as generate_dot_cells
