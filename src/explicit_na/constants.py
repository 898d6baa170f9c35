"""Project-wide defaults for explicit missing-value labels.

Update here to change the sentinel label or the environment variables the
options store consults.
"""

# Label used for text and categorical data when no replacement is supplied.
NA_EXPLICIT = "(NA)"

# Environment overrides read by config.options.get_options()
ENV_EXPLICIT = "NA_EXPLICIT"
ENV_VERBOSE = "NA_VERBOSE"
