# Tests for quantum_gyro
#
# Test organization mirrors source structure:
#   - test_sensors/: Closed-form phase-shift physics per sensing principle
#   - test_models.py: Model registry and configuration dataclasses
#   - test_sweeps.py: Rotation-rate and parameter sweeps
#   - test_calibration.py: Phase wrapping and scale-factor fits
#   - test_visualization.py: Plot smoke tests (Agg backend)
#
# Running tests:
#   pytest tests/
#   pytest tests/test_sensors/ -v
#   pytest tests/ -k "sagnac"
