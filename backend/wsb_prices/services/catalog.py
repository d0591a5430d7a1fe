from typing import Dict

from wsb_prices.schemas import StockGroup


_GROUPS: Dict[str, dict] = {
    "tech": {
        "name": "Tech Giants",
        "symbols": ["AAPL", "MSFT", "GOOGL", "META", "NVDA", "NFLX", "AMZN", "TSLA"],
        "description": "Major technology companies",
    },
    "finance": {
        "name": "Financial Sector",
        "symbols": ["JPM", "BAC", "WFC", "GS", "MS", "C", "AXP", "V"],
        "description": "Banking and financial services",
    },
    "healthcare": {
        "name": "Healthcare",
        "symbols": ["JNJ", "PFE", "UNH", "ABBV", "MRK", "TMO", "ABT", "LLY"],
        "description": "Pharmaceutical and healthcare companies",
    },
    "energy": {
        "name": "Energy Sector",
        "symbols": ["XOM", "CVX", "COP", "EOG", "SLB", "KMI", "PSX", "VLO"],
        "description": "Oil, gas, and energy companies",
    },
    "retail": {
        "name": "Retail & Consumer",
        "symbols": ["WMT", "TGT", "COST", "HD", "LOW", "NKE", "SBUX", "MCD"],
        "description": "Retail and consumer goods",
    },
    "crypto": {
        "name": "Crypto-Related",
        "symbols": ["COIN", "MSTR", "RIOT", "MARA", "HUT", "BITF", "CAN", "HIVE"],
        "description": "Cryptocurrency and blockchain companies",
    },
}


def list_groups() -> Dict[str, StockGroup]:
    return {key: StockGroup(**group) for key, group in _GROUPS.items()}
