# -*- coding: utf-8 -*-
"""
Command-line entry points:

    python -m gridsearch.cli.run_search     one strategy on one board
    python -m gridsearch.cli.run_benchmark  all strategies on many random boards -> CSV
"""
