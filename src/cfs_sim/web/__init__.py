"""JSON web API for the simulator.

This package provides a Flask application that runs simulations over
HTTP.  It is an **optional** extra — install with::

    pip install cfs-sim[web]

The ``create_app`` factory in ``app.py`` serves:

- ``GET /api/config`` — default scheduler config.
- ``GET /api/sample`` — the sample population.
- ``POST /api/schedule`` — run a simulation and return JSON.
"""
