import re

# Accepted external link: http(s) scheme followed by a word character
EXTERNAL_URL_PATTERN = re.compile(r"^https?://\w")
