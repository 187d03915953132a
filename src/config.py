# src/config.py

# Lido rewards API (https://stake.lido.fi)
LIDO_API_URL = "https://stake.lido.fi/api/rewards"
REQUEST_TIMEOUT_SECONDS = 10

# Query parameters forwarded verbatim to the rewards API
DEFAULT_CURRENCY = "USD" # Display currency only, amounts in the report stay in the token unit
ARCHIVE_RATE = "false"
ONLY_REWARDS = "true"

# Tax year being reported
TAX_YEAR = 2023

# Output file, None means "<year>-report.csv" in the working directory
OUTPUT_FILE_PATH = None
OUTPUT_FILE_NAME_TEMPLATE = "{tax_year}-report.csv"

# Constant report columns (Blockpit manual import layout)
INTEGRATION_NAME = "Lido stETH"
LABEL = "Staking"
ASSET_SYMBOL = "stETH"
COMMENT = "Lido stETH staking reward"

# stETH is an 18 decimal token, raw amounts are denominated in its smallest unit
TOKEN_DECIMALS = 18

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
