from hostinfo.distro import DistributionInfo, detect_linux_distribution
from hostinfo.utils.errors import HostInfoError, ParseError
from hostinfo.utils.osdetect import OSFamily, classify, get_os, is_os

__version__ = "0.1.0"

__all__ = [
    "DistributionInfo",
    "HostInfoError",
    "OSFamily",
    "ParseError",
    "classify",
    "detect_linux_distribution",
    "get_os",
    "is_os",
]
