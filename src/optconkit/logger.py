"""Contains the name for the logger of OptconKit modules.

``optconkit`` logs through the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library
and emits records at two levels:

* ``DEBUG``: bookkeeping, e.g. how many values a spliner stored.
* ``WARNING``: a finite-difference Jacobian contains non-finite entries.

Only ``WARNING`` records are shown unless the calling application lowers the
level of ``optconkit.logger.optconkit_logger``. To also see the ``DEBUG``
records::

    >>> import logging
    >>> logging.basicConfig(format="%(asctime)s | %(name)s | %(levelname)s | %(message)s")
    >>> logging.getLogger("optconkit").setLevel(logging.DEBUG)
"""
import logging

logger_name = "optconkit"
optconkit_logger = logging.getLogger(logger_name)
