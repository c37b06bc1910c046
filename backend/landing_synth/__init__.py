"""Rule-based prompt-to-landing-page synthesizer"""

__version__ = "0.1.0"
