"""Mail upselling: NPS feedback collection and relay."""

__version__ = "0.1.0"
