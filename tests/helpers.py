# (c) Copyright IBM Corp. 2025

APP_ID = "application_1700000000000_0042"
CONTAINER_DIR = (
    f"/hadoop/yarn/nm-local-dir/usercache/alice/appcache/{APP_ID}/"
    "container_1700000000000_0042_01_000002"
)
