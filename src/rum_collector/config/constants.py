"""
Constants for RUM event classification and anonymization.
"""

# =============================================================================
# Checkpoint Vocabulary
# =============================================================================

# Bump when entries are added. Entries are never renamed because stored
# events reference the old names.
CHECKPOINT_VOCABULARY_VERSION = "2024.3"

KNOWN_CHECKPOINTS = frozenset(
    [
        "loadresource",
        "cwv",
        "cwv2",
        "click",
        "top",
        "lazy",
        "viewmedia",
        "viewblock",
        "leave",
        "load",
        "enter",
        "error",
        "navigate",
        "utm",
        "reload",
        "back_forward",
        "lcp",
        "missingresource",
        "sidekick:shown",
        "sidekick:loaded",
        "experiment",
        "formsubmit",
        "sidekick:hidden",
        "sidekick:updated",
        "sidekick:previewed",
        "sidekick:envswitched",
        "404",
        "crosswalk:previewed",
        "crosswalk:published",
        "sidekick:editoropened",
        "sidekick:published",
        "convert",
        "audiences",
        "viewfooter",
        "sidekick:loggedin",
        "search",
        "unsupported",
        "genai:prompt:generate",
        "sidekick:info",
        "genai:prompt:generatedvariations",
        "genai:prompt:isadobeselected",
        "formviews",
        "formready",
        "sidekick:custom:preflight",
        "formabondoned",
        "noscript",
        "sidekick:paletteclosed",
        "sidekick:custom:asset-library",
        "formfieldchange",
        "formfieldfocus",
        "nullsearch",
        "sidekick:custom:library",
        "variant",
        "genai:prompt:iscustomselected",
        "genai:consent:agree",
        "genai:prompt:new",
        "formhttppostput",
        "genai:prompt:copy",
        "sidekick:custom:localize-2",
        "sidekick:context-menu:addRemoveProject",
        "sidekick:viewdocsource",
        "sidekick:context-menu:openViewDocSource",
        "sidekick:unpublished",
        "sidekick:helpnext",
        "library:blockviewed",
        "formvalidationerrors",
        "showconsent",
        "consent",
        "paid",
        "email",
        "genai:consent:cancel",
        "sidekick:deleted",
        "sidekick:custom:version-history",
        "sidekick:custom:ost",
        "genai:prompt:thumbsup",
        "sidekick:custom:localize-v2",
        "sidekick:viewhidden",
        "sidekick:helpdismissed",
        "sidekick:custom:tagger",
        "sidekick:custom:assist",
        "sidekick:helpoptedout",
        "sidekick:custom:send-to-caas",
        "sidekick:share",
        "sidekick:custom:generate-variations",
        "sidekick:projectadded",
        "library:opened",
        "signin",
        "genai:prompt:export",
        "sidekick:custom:accessibility-mode",
        "sidekick:custom:locales",
    ]
)

# Retired on purpose. Kept here for reference only, they must stay out of
# KNOWN_CHECKPOINTS unless the vocabulary version is bumped.
RETIRED_CHECKPOINTS = frozenset(
    [
        "pagesviewed",
        "datadesk",
        "rfq",
        "csperror",
    ]
)

# =============================================================================
# Time Masking
# =============================================================================

MS_PER_HOUR = 3_600_000
MAX_PADDING_MS = 24 * MS_PER_HOUR

# =============================================================================
# Header Names
# =============================================================================

# CloudFront viewer hints, checked in this order
CLOUDFRONT_DESKTOP_VIEWER = "CloudFront-Is-Desktop-Viewer"
CLOUDFRONT_MOBILE_VIEWER = "CloudFront-Is-Mobile-Viewer"
CLOUDFRONT_SMARTTV_VIEWER = "CloudFront-Is-SmartTV-Viewer"
CLOUDFRONT_TABLET_VIEWER = "CloudFront-Is-Tablet-Viewer"

MONITORING_HEADER = "x-newrelic-id"
USER_AGENT_HEADER = "user-agent"
REFERER_HEADER = "referer"

ROUTING_HEADER = "x-adobe-routing"
FORWARDED_HOST_HEADER = "x-forwarded-host"
HOST_HEADER = "host"

# =============================================================================
# Client Classification
# =============================================================================

UNDEFINED = "undefined"

MOBILE_MARKERS = ("mobile", "android", "opera mini")

BOT_MARKERS = (
    "bot",
    "spider",
    "crawler",
    "ahc/",
    "node",
    "python",
    "probe",
    "axios",
    "curl",
    "synthetics",
    "+https://",
    "+http://",
)

# =============================================================================
# Subsystem Resolution
# =============================================================================

ROUTING_DOMAIN = "adobeaemcloud.net"

# At least one hyphenated segment in front of a recognized platform domain
PLATFORM_HOST_PATTERN = r".+-.+[.](adobeaemcloud|aemcloud|aem|hlx)[.](page|live|net)$"

# =============================================================================
# Event Fields
# =============================================================================

URL_FIELDS = ("url", "source", "target")

CWV_METRICS = ("CLS", "LCP", "FID", "INP", "TTFB")
