# ============================================================================
# CONFIG LOADER - Centralized Configuration Management
# ============================================================================

import os
from typing import Dict, Any
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Config:
    """Centralized configuration object."""
    
    # === APPLICATION ===
    ENV = os.getenv('ENV', 'development')
    DEBUG = os.getenv('DEBUG', 'true').lower() == 'true'
    PROJECT_NAME = os.getenv('PROJECT_NAME', 'pricing-intelligence-engine')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    
    # === API ===
    API_HOST = os.getenv('API_HOST', '0.0.0.0')
    API_PORT = int(os.getenv('API_PORT', 8000))
    
    # === DATA GENERATION ===
    SYNTHETIC_DATA_SEED = int(os.getenv('SYNTHETIC_DATA_SEED', 12345))
    SYNTHETIC_NUM_COMPANIES = int(os.getenv('SYNTHETIC_NUM_COMPANIES', 50))
    USAGE_HISTORY_DAYS = int(os.getenv('USAGE_HISTORY_DAYS', 180))
    
    # === ANALYTICS ===
    REVENUE_TREND_DAYS = int(os.getenv('REVENUE_TREND_DAYS', 90))
    CHURN_PREDICTION_LIMIT = int(os.getenv('CHURN_PREDICTION_LIMIT', 20))
    TOP_LEAKS_LIMIT = int(os.getenv('TOP_LEAKS_LIMIT', 10))
    
    # === COMPUTED VALUES ===
    @property
    def API_BASE_URL(self) -> str:
        """Base URL the dashboard API listens on."""
        return f'http://{self.API_HOST}:{self.API_PORT}'
    
    def to_dict(self) -> Dict[str, Any]:
        """Export config as dictionary."""
        return {
            k: getattr(self, k)
            for k in dir(self)
            if k.isupper() and not k.startswith('_')
        }


# Singleton instance
config = Config()
