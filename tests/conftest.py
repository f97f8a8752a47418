import os

from hypothesis import HealthCheck, settings

# Property tests run with the default profile locally. Set HYPOTHESIS_PROFILE=ci
# for a longer run; it also tolerates slow data generation on shared runners.
settings.register_profile("ci", max_examples=500, suppress_health_check=[HealthCheck.too_slow])
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))
