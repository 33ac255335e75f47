"""
YES portal constants.
"""

# Base URLs
JOB_BOARD_URL = "https://yes.umass.edu/portal/jobsearch?cmd=search"
JOB_DETAILS_URL = "https://yes.umass.edu/portal/jobsearch?cmd=Details&job_number_details="

# Proxy query parameter carrying comma-separated job ids
JOB_IDS_PARAM = "jobIds"

# Listing date format (e.g. 01/15/2024)
LISTING_DATE_FORMAT = "%m/%d/%Y"
