"""lottiekit - keyframe timeline and Lottie export engine."""

__version__ = "0.1.0"
