import logging

"""
Create a global logger instance. The level is set from the configuration when
`fixed_point_math.config` is imported.
"""

logger = logging.getLogger("fixed_point_math")
logger.propagate = False
logger.setLevel(logging.INFO)

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
logger.addHandler(_handler)
