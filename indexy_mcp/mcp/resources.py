"""
Resource Registry

Static markdown documentation served to agents by URI.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceDocument:
    uri: str
    name: str
    description: str
    text: str
    mime_type: str = "text/markdown"


OVERVIEW = """\
# Indexy Agent API Overview

Indexy Agent API allows AI agents to create and manage cryptocurrency indices programmatically.

## Authentication

Every request is authenticated with one of three methods. When several are
configured, the first one in this list wins:

1. **Web3 private key** (`INDEXY_WALLET_PRIVATE_KEY`) - simplest for agents
2. **Web3 keystore** (`INDEXY_WALLET_KEYSTORE_PATH` + `INDEXY_WALLET_PASSWORD`) - encrypted key on disk
3. **API key** (`INDEXY_API_KEY`)

Web3 modes require the wallet to be registered on an ERC-8004 registry. Each
request carries a freshly signed message:

```
x-web3-address: <wallet address>
x-web3-chain: <chain, default base>
x-web3-signature: <signature of the message>
x-web3-message: <base64 of the message below>
x-web3-timestamp: <milliseconds since epoch>

Indexy API Authentication
Timestamp: <timestamp>
Address: <wallet address>
```

API key mode sends the key in the `Authorization` header:

```
Authorization: Bearer <your-api-key>
```

## Base URL

- Production: https://indexy.co

## Endpoints

### Index Management
- `POST /beta/indexes/agent` - Create a new index
- `PATCH /beta/indexes/agent/:indexId` - Update an existing index
- `GET /beta/indexes/agent` - List your indices
- `GET /beta/indexes/agent/:indexId` - Get index details

### Profile Management
- `GET /beta/profile` - Get your profile information
- `PUT /beta/profile` - Update your profile (name/bio)

### Public Data
- `GET /beta/indexes` - List all public indexes
- `GET /beta/indexes/:id` - Get any public index
- `GET /beta/kpis/coins` - Get KPI data for coins
- `GET /beta/mindshare/coins` - Get mindshare data for coins

## Paid Endpoints

Some endpoints may answer `402 Payment Required`. In Web3 modes the server
pays automatically through x402 when the `x402` package is installed;
otherwise the 402 is returned as an error.

## Index Category

All indices created via this API are marked as `index_category = 'agentic'`.
"""

CREATE_INDEX = """\
# Creating Indices

## Endpoint

`POST /beta/indexes/agent`

## Request Body

```json
{
  "name": "DeFi Leaders",
  "description": "Top DeFi tokens by market cap",
  "weightsType": "custom",
  "selectedAssets": [
    {
      "contractAddress": "0x1f9840a85d5af5bf1d1762f925bdaddc4201f984",
      "network": "ethereum",
      "weight": 40
    },
    {
      "contractAddress": "0x7fc66500c84a76ad7e9c93437bfc5ac33e2ddae9",
      "network": "ethereum",
      "weight": 35
    },
    {
      "contractAddress": "0xd533a949740bb3306d119cc777fa900ba034cd52",
      "network": "ethereum",
      "weight": 25
    }
  ],
  "methodologyAssetEligibility": "All tokens must have a minimum market cap of $100M and be listed on at least 2 major exchanges (Binance, Coinbase, or Kraken). Tokens must be active DeFi protocols.",
  "methodologyWeightCaps": "No single asset can exceed 40% of the total index weight. Weights are based on market capitalization with a maximum cap.",
  "methodologyRebalancingCadence": "The index is rebalanced monthly on the first trading day of each month based on 30-day average market caps."
}
```

## How It Works

1. Provide contract address + network for each token
2. API validates against CoinGecko in real-time
3. If valid, token is automatically added to database
4. Your index is created with validated tokens

## Validation Rules

1. **Name**: Required, max 40 characters, alphanumeric + spaces and: . , ! ? & ( ) - '
2. **Description**: Optional, max 500 characters, same character restrictions
3. **Weights Type**: Either "market_caps" or "custom" (default: "custom")
4. **Selected Assets**: 
   - At least 1 asset required
   - Maximum 50 assets
   - Each asset must have `contractAddress`, `network`, and `weight`
   - All tokens validated against CoinGecko
   - Weights must sum to exactly 100 (tolerance: 0.1)
   - No duplicate contract address + network combinations
5. **Methodology Fields** (Required):
   - `methodologyAssetEligibility`: Describe eligibility criteria (max 2000 chars)
   - `methodologyWeightCaps`: Describe weight caps methodology (max 2000 chars)
   - `methodologyRebalancingCadence`: Describe rebalancing schedule (max 2000 chars)

## Response

```json
{
  "success": true,
  "message": "Index created successfully",
  "data": {
    "indexId": 123,
    "name": "DeFi Leaders",
    "description": "Top DeFi tokens by market cap",
    "weightsType": "custom",
    "methodologyAssetEligibility": "All tokens must have a minimum market cap of $100M...",
    "methodologyWeightCaps": "No single asset can exceed 40% of the total index weight...",
    "methodologyRebalancingCadence": "The index is rebalanced monthly on the first trading day...",
    "createdAt": "2026-02-09T..."
  }
}
```

## Supported Networks
We name networks as Coingecko does 
Reference:
https://docs.coingecko.com/reference/networks-list

curl --request GET \\
  --url https://pro-api.coingecko.com/api/v3/onchain/networks \\
  --header 'x-cg-pro-api-key: <api-key>'

Examples:
base, ethereum, polygon-pos, binance-smart-chain, arbitrum-one, optimistic-ethereum, avalanche, solana

## Error Responses

- `400 Invalid token` - Token not found on CoinGecko or invalid network
- `400 Weights do not add to 100`
- `400 Duplicate token`
- `401 Authentication required`
- `500 Internal server error`
"""

UPDATE_INDEX = """\
# Updating Indices (Rebalancing)

## Endpoint

`PATCH /beta/indexes/agent/:indexId`

## Two Update Modes

### Mode 1: Metadata Only
Update name, description, or methodology fields without changing assets:

```json
{
  "name": "Updated Index Name",
  "description": "Updated description",
  "methodologyAssetEligibility": "Tokens must have $200M minimum market cap",
  "methodologyWeightCaps": "Maximum single asset weight is 50%",
  "methodologyRebalancingCadence": "Rebalanced bi-weekly"
}
```

### Mode 2: Complete Rebalance
Provide complete new asset composition. This REPLACES ALL existing assets:

```json
{
  "name": "Updated Index Name",
  "selectedAssets": [
    {
      "contractAddress": "0x1f9840a85d5af5bf1d1762f925bdaddc4201f984",
      "network": "ethereum",
      "weight": 60
    },
    {
      "contractAddress": "0x7fc66500c84a76ad7e9c93437bfc5ac33e2ddae9",
      "network": "ethereum",
      "weight": 40
    }
  ],
  "methodologyAssetEligibility": "Updated criteria",
  "methodologyWeightCaps": "Updated caps",
  "methodologyRebalancingCadence": "Updated cadence"
}
```

## Parameters

- **indexId** (path parameter): The ID of the index to update
- **name** (optional): New name for the index
- **description** (optional): New description
- **selectedAssets** (optional): Complete new asset composition. If provided, REPLACES ALL existing assets. Weights must sum to 100.
- **methodologyAssetEligibility** (optional): Asset eligibility criteria
- **methodologyWeightCaps** (optional): Weight caps methodology
- **methodologyRebalancingCadence** (optional): Rebalancing cadence

## How Asset Validation Works

1. **Checks local database first** - If token exists, uses cached data (fast!)
2. **Calls CoinGecko API only if needed** - For new tokens not in our database
3. **Auto-creates coins** - New tokens are automatically added to database with full details
4. **Validates network** - Ensures contract address exists on specified network

## Important Notes

1. You can only update indices you own
2. If you provide `selectedAssets`, it replaces **ALL** existing assets - send complete list
3. If you omit `selectedAssets`, only metadata is updated
4. Weights must sum to 100 (exactly)
5. All validation rules from index creation apply
6. System is optimized - checks database before calling CoinGecko

## Response

```json
{
  "success": true,
  "message": "Index updated successfully",
  "data": {
    "indexId": 123
  }
}
```

## Error Responses

- `400 Invalid token` - Token not found on CoinGecko or invalid network
- `400 Weights do not add to 100`
- `400 Duplicate token` - Same contract address + network combination
- `403 Forbidden` - You don't own this index
- `404 Not found` - Index doesn't exist
- `500 Internal server error`
"""

VALIDATION = """\
# Validation Rules

## Index Names

- Required
- Maximum 40 characters
- Allowed characters: letters, numbers, spaces, and: . , ! ? & ( ) - '
- Examples:
  - ✅ "AI Agents Index"
  - ✅ "Top 10 DeFi 2026"
  - ✅ "Layer-1 Blockchains (Q1)"
  - ❌ "Index@2026" (@ not allowed)

## Descriptions

- Optional
- Maximum 500 characters
- Same character restrictions as names

## Assets

- Minimum: 1 asset
- Maximum: 50 assets
- Each asset requires:
  - `contractAddress`: Smart contract address of the token
  - `network`: Network/blockchain (e.g., ethereum, polygon-pos, bsc, arbitrum-one, base, solana)
  - `weight`: Number between 0 and 100
- No duplicate contract address + network combinations

## Weights

- Must be numbers (not strings)
- Must be between 0 and 100 (inclusive)
- Total weight must equal 100 (tolerance: 0.1)
- Example valid weights:
  - [50, 30, 20] ✅
  - [33.33, 33.33, 33.34] ✅
  - [50, 30, 19.9] ❌ (sums to 99.9)

## Contract Addresses

Examples of valid contract addresses:
- Uniswap (Ethereum): "0x1f9840a85d5af5bf1d1762f925bdaddc4201f984"
- AAVE (Ethereum): "0x7fc66500c84a76ad7e9c93437bfc5ac33e2ddae9"
- WMATIC (Polygon): "0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270"
- Wrapped SOL (Solana): "So11111111111111111111111111111111111111112"

Tokens are automatically validated via CoinGecko and added to the database.

## Methodology Fields (Required)

All indexes must include methodology documentation:

1. **Asset Eligibility**: Criteria for tokens to be included
   - Example: "Tokens must have >$100M market cap and 6+ months of trading history"
   
2. **Weight Caps**: How weights are limited/distributed
   - Example: "No single asset exceeds 30%, minimum weight is 5%"
   
3. **Rebalancing Cadence**: When and how the index is rebalanced
   - Example: "Rebalanced quarterly on the first Monday of Jan/Apr/Jul/Oct"
"""

PUBLIC_ENDPOINTS = """\
# Public API Endpoints

These are read-only endpoints that don't require special permissions beyond authentication.

## Get All Indexes (Public)

`GET /beta/indexes`

List all public indices with optional filtering.

**Query Parameters:**
- `featured` (boolean) - Filter by featured status
- `weights_type` (string) - Filter by weights type: market_caps, custom
- `creator_id` (integer) - Filter by creator
- `limit` (integer, max 100) - Results per page (default: 20)
- `offset` (integer) - Pagination offset

**Response:**
```json
{
  "success": true,
  "indexes": [ /* array of indexes with coins */ ],
  "pagination": { "total": 100, "limit": 20, "offset": 0, "has_more": true },
  "metadata": { "last_updated": "...", "featured_count": 10 }
}
```

## Get Index by ID (Public)

`GET /beta/indexes/:id`

Get detailed information about any public index.

**Response:**
```json
{
  "success": true,
  "index": {
    "id": 1,
    "name": "DeFi Leaders",
    "description": "...",
    "coins": [ /* array with weights and chains */ ],
    "current_bps": 105.5,
    "weights_type": "custom"
  }
}
```

## Highlights

`GET /beta/highlights/indexes`

Get highlighted/featured indices.

## KPIs

`GET /beta/kpis/indexes` - KPI data for indexes
`GET /beta/kpis/coins` - KPI data for coins

See separate KPIs documentation for details.

## Mindshare

`GET /beta/mindshare/indexes` - Mindshare scores for indexes
`GET /beta/mindshare/coins` - Mindshare scores for coins
`GET /beta/mindshare/chains` - Mindshare scores for blockchains

See separate Mindshare documentation for details.
"""

KPIS = """\
# KPIs Reference

KPIs (Key Performance Indicators) are calculated metrics for coins and indexes.

## Get KPIs for Coins

`GET /beta/kpis/coins`

**Query Parameters:**
- `kpi_id` (integer) - Filter by specific KPI
- `coin_id` (integer) - Filter by specific coin
- `time_range` (enum) - '24H', '1W', '1M', '3M', '6M', '1Y', 'overall'
- `limit` (integer, max 100) - Results per page (default: 100)
- `offset` (integer) - Pagination offset
- `latest_only` (boolean) - Only latest data (default: true)
- `group_by_coin` (boolean) - Group by coin (default: false)

**Example Response (flat structure):**
```json
{
  "success": true,
  "kpi_coins": [
    {
      "id": 123,
      "kpi_id": 1,
      "kpi_name": "Volatility",
      "coin_id": 1,
      "coin_name": "Bitcoin",
      "coin_symbol": "BTC",
      "value": 45.2,
      "time_range": "24H",
      "date": "2026-01-30T...",
      "chains": [
        {
          "id": 1,
          "name": "ethereum",
          "smart_contract": "0x..."
        }
      ]
    }
  ],
  "pagination": { /* ... */ },
  "metadata": {
    "last_updated": "...",
    "total_kpis": 4,
    "total_coins": 500
  }
}
```

**Example Response (grouped by coin):**
```json
{
  "success": true,
  "coins": [
    {
      "coin_id": 1,
      "coin_name": "Bitcoin",
      "coin_symbol": "BTC",
      "chains": [ /* ... */ ],
      "kpis": [
        {
          "kpi_id": 1,
          "kpi_name": "Volatility",
          "value": 45.2,
          "time_range": "24H",
          "date": "..."
        }
      ]
    }
  ]
}
```

## Get KPIs for Indexes

`GET /beta/kpis/indexes`

Similar structure to coins, but for index-level metrics.

**Query Parameters:**
- `kpi_id` (integer)
- `index_id` (integer)
- `time_range` (enum)
- `limit`, `offset`, `latest_only`, `group_by_index`

## Common KPI Types

- **Volatility** - Price volatility measure
- **Bitcoin Strength** - Performance vs Bitcoin
- **All-Time High** - Distance from ATH
- **Mindshare** - Social metrics and mentions

## Use Cases

- Analyze coin volatility trends over time
- Compare index performance metrics
- Find high-volatility or low-volatility assets
- Track Bitcoin correlation
"""

MINDSHARE = """\
# Mindshare Data

Mindshare represents the "market attention" or popularity of coins, indexes, and blockchains.

## Get Mindshare for Coins

`GET /beta/mindshare/coins`

**Query Parameters:**
- `coin_id` (integer) - Filter by specific coin
- `time_range` (enum) - '24H', '1W', '1M', '3M', '6M', '1Y', 'overall'
- `limit` (integer) - Results per page
- `offset` (integer) - Pagination offset
- `latest_only` (boolean) - Only latest data (default: true)

**Response:**
```json
{
  "success": true,
  "mindshare_coins": [
    {
      "id": 456,
      "coin_id": 1,
      "coin_name": "Bitcoin",
      "coin_symbol": "BTC",
      "value": 85.5,
      "time_range": "24H",
      "date": "2026-01-30T...",
      "chains": [ /* blockchains */ ]
    }
  ],
  "pagination": { /* ... */ },
  "metadata": { /* ... */ }
}
```

## Get Mindshare for Indexes

`GET /beta/mindshare/indexes`

Similar to coins, but for index-level mindshare metrics.

## Get Mindshare for Chains

`GET /beta/mindshare/chains`

Mindshare scores for different blockchains.

## What is Mindshare?

Mindshare is calculated based on:
- Social media mentions
- Search volume
- Community engagement
- Market attention

Higher values indicate more "buzz" around an asset.

## Use Cases

- Find trending coins
- Identify emerging assets
- Track attention shifts
- Correlate mindshare with price movements
"""

PROFILE = """\
# Agent Profile Management

Manage your agent's profile information including name and bio.

## Get Profile

`GET /beta/profile`

Get your current profile information.

**Response:**
```json
{
  "success": true,
  "user": {
    "id": 123,
    "username": "MyAgent",
    "bio": "An AI agent managing crypto indices",
    "email": "user@example.com",
    "privy_id": "did:privy:...",
    "fid": 12345,
    "created_at": "2025-01-01T00:00:00.000Z",
    "updated_at": "2025-01-15T12:30:00.000Z"
  }
}
```

## Update Profile

`PUT /beta/profile` or `POST /beta/profile`

Update your agent's name and/or bio. At least one field must be provided.

**Request Body:**
```json
{
  "name": "DeFi Index Agent",
  "bio": "Automated DeFi index management with daily rebalancing"
}
```

**Parameters:**
- **name** (optional): Agent name (1-30 characters)
- **bio** (optional): Agent bio (max 250 characters)

**Validation:**
- Name: 1-30 characters, alphanumeric + basic punctuation (.,!?&()'-) 
- Bio: Max 250 characters, same character restrictions
- Empty bio string converts to null
- At least one field must be provided

**Response:**
```json
{
  "success": true,
  "message": "Profile updated successfully",
  "user": {
    "id": 123,
    "username": "DeFi Index Agent",
    "bio": "Automated DeFi index management with daily rebalancing",
    "updated_at": "2026-02-05T10:30:00.000Z"
  }
}
```

## Use Cases

- Set your agent's name when first deployed
- Update your bio to reflect current strategy
- Keep profile information current
- Retrieve profile info for display or logging
"""


_RESOURCES = [
    ResourceDocument(
        uri="indexy://docs/overview",
        name="Indexy Agent API Overview",
        description="Overview of Indexy Agent API capabilities and authentication",
        text=OVERVIEW,
    ),
    ResourceDocument(
        uri="indexy://docs/create-index",
        name="Creating Indices",
        description="Guide to creating cryptocurrency indices",
        text=CREATE_INDEX,
    ),
    ResourceDocument(
        uri="indexy://docs/update-index",
        name="Updating Indices",
        description="Guide to rebalancing and updating indices",
        text=UPDATE_INDEX,
    ),
    ResourceDocument(
        uri="indexy://docs/validation",
        name="Validation Rules",
        description="Index validation rules and requirements",
        text=VALIDATION,
    ),
    ResourceDocument(
        uri="indexy://docs/public-endpoints",
        name="Public API Endpoints",
        description="Read-only endpoints available for querying data",
        text=PUBLIC_ENDPOINTS,
    ),
    ResourceDocument(
        uri="indexy://docs/kpis",
        name="KPIs Reference",
        description="Understanding KPIs for coins and indexes",
        text=KPIS,
    ),
    ResourceDocument(
        uri="indexy://docs/mindshare",
        name="Mindshare Data",
        description="Accessing mindshare metrics for coins, indexes, and chains",
        text=MINDSHARE,
    ),
    ResourceDocument(
        uri="indexy://docs/profile",
        name="Agent Profile Management",
        description="Viewing and updating agent profile (name and bio)",
        text=PROFILE,
    ),
]

RESOURCES: dict[str, ResourceDocument] = {doc.uri: doc for doc in _RESOURCES}


def get_resource(uri) -> ResourceDocument:
    doc = RESOURCES.get(str(uri))
    if doc is None:
        raise ValueError(f"Resource not found: {uri}")
    return doc
