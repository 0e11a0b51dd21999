"""
Default parameters shared by the curve modules.
"""

# Sampling
DEFAULT_SAMPLES = 100  # segments per sampled curve (yields DEFAULT_SAMPLES + 1 points)

# Numerical tolerance used by equivalence checks (de Casteljau vs. Bernstein, round trips)
DEFAULT_TOLERANCE = 1e-9
