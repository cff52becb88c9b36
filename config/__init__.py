"""
config
------

Filesystem locations and the facility constants file (`constants.json`).
"""
