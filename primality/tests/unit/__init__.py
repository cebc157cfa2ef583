"""
Unit tests for primality components

- test_modpow.py: modular exponentiation
- test_random_range.py: bounded random sampling
- test_trial_division.py: deterministic primality test
- test_miller_rabin.py: probabilistic primality test
- test_timing.py, test_report.py, test_config.py, test_logging_config.py: glue
"""
