"""Shared pytest configuration for the bstlib test suite."""


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running randomized workloads")
