"""firstmillion — compound-interest projection toward the first million."""

__version__ = "0.1.0"

from firstmillion.config.defaults import MILESTONE_AMOUNT as MILESTONE_AMOUNT
from firstmillion.config.defaults import default_inputs as default_inputs
from firstmillion.config.defaults import preset_inputs as preset_inputs
from firstmillion.config.schema import PeriodType as PeriodType
from firstmillion.config.schema import ProjectionInputs as ProjectionInputs
from firstmillion.config.schema import RateType as RateType
from firstmillion.core.engine import MonthlySnapshot as MonthlySnapshot
from firstmillion.core.engine import ProjectionResult as ProjectionResult
from firstmillion.core.engine import SummaryStats as SummaryStats
from firstmillion.core.engine import monthly_rate as monthly_rate
from firstmillion.core.engine import project as project
from firstmillion.core.engine import project_inputs as project_inputs
from firstmillion.io.formatting import format_currency as format_currency
from firstmillion.io.formatting import format_duration as format_duration
