"""
AI Cost Compass - Pricing Parameters
------------------------------------
Single source of truth for every pricing table, fixed cost constant,
option label and default configuration used by the three calculators.

Usage:
    from pricing_parameters import FACTORY, MANPOWER, ROBOT, COMMON
"""

# =============================================================================
# 0. COMMON PARAMETERS (Shared Across All Calculators)
# =============================================================================
COMMON = {
    # Calculator identifiers - used by the session state and export bundle
    "CALCULATOR_IDS": ["robot", "factory", "manpower"],

    "HOURS_PER_DAY": 24,
    "DAYS_PER_YEAR": 365,
    "MONTHS_PER_YEAR": 12,
}

# =============================================================================
# 1. FACTORY PARAMETERS (AI Data Center)
# =============================================================================
FACTORY = {
    "GPU_TYPES": ["h100", "a100", "l40s"],
    "REGIONS": ["us", "eu", "asia"],

    # Unit price per GPU (USD)
    "GPU_PRICES": {
        "h100": 30970,
        "a100": 18000,
        "l40s": 8000,
    },

    # Board power per GPU (W)
    "GPU_POWER_WATTS": {
        "h100": 700,
        "a100": 400,
        "l40s": 300,
    },

    # Construction cost (USD per sq ft)
    "CONSTRUCTION_COST_PER_SQFT": {
        "us": 800,
        "eu": 900,
        "asia": 600,
    },

    # Annual salary per data center staff member (USD)
    "STAFF_SALARY": {
        "us": 120000,
        "eu": 85000,
        "asia": 35000,
    },

    "RACK_COST": 3000,               # per rack
    "NETWORKING_COST_PER_RACK": 30000,
    "RACK_OVERHEAD_WATTS": 2000,     # non-GPU load per rack

    # Cooling and backup power are bought in capacity blocks
    "COOLING_BLOCK_KW": 5000,        # 5 MW
    "COOLING_BLOCK_COST": 2000000,
    "BACKUP_BLOCK_KW": 2000,         # 2 MW
    "BACKUP_BLOCK_COST": 750000,

    "TCO_YEARS": 5,

    "GPU_LABELS": {
        "h100": "NVIDIA H100 80GB - $30,970",
        "a100": "NVIDIA A100 80GB - $18,000",
        "l40s": "NVIDIA L40S - $8,000",
    },
    "REGION_LABELS": {
        "us": "North America - $800/sq ft",
        "eu": "Europe - $900/sq ft",
        "asia": "Asia Pacific - $600/sq ft",
    },

    "DEFAULTS": {
        "facility_size": 100000,
        "rack_count": 500,
        "gpu_type": "h100",
        "gpu_per_rack": 8,
        "power_cost_per_kwh": 0.15,
        "pue": 1.58,
        "staff_count": 15,
        "region": "us",
    },

    # Value used when a form field cannot be parsed
    "FALLBACKS": {
        "facility_size": 0,
        "rack_count": 0,
        "gpu_per_rack": 1,
        "power_cost_per_kwh": 0.0,
        "pue": 1.0,
        "staff_count": 0,
    },

    # Largest accepted value per field; larger input is clamped
    "LIMITS": {
        "facility_size": 100000000,
        "rack_count": 1000000,
        "gpu_per_rack": 1000,
        "power_cost_per_kwh": 10.0,
        "pue": 10.0,
        "staff_count": 1000000,
    },
}

# =============================================================================
# 2. MANPOWER PARAMETERS (AI Team)
# =============================================================================
MANPOWER = {
    "REGIONS": ["us", "eu", "india", "asia"],
    "EMPLOYMENT_TYPES": ["fulltime", "freelance"],

    # (role key, display name) in report order
    "ROLES": [
        ("ml_engineer", "ML Engineers"),
        ("ai_researcher", "AI Researchers"),
        ("data_scientist", "Data Scientists"),
        ("mlops_engineer", "MLOps Engineers"),
        ("devops_engineer", "DevOps Engineers"),
        ("product_manager", "Product Managers"),
    ],

    # Region -> role -> fulltime annual salary (USD) / freelance hourly rate (USD)
    "SALARIES": {
        "us": {
            "ml_engineer":     {"fulltime": 158000, "freelance": 150},
            "ai_researcher":   {"fulltime": 258000, "freelance": 200},
            "data_scientist":  {"fulltime": 140000, "freelance": 130},
            "mlops_engineer":  {"fulltime": 155000, "freelance": 140},
            "devops_engineer": {"fulltime": 135000, "freelance": 125},
            "product_manager": {"fulltime": 180000, "freelance": 160},
        },
        "eu": {
            "ml_engineer":     {"fulltime": 95000,  "freelance": 120},
            "ai_researcher":   {"fulltime": 180000, "freelance": 150},
            "data_scientist":  {"fulltime": 85000,  "freelance": 100},
            "mlops_engineer":  {"fulltime": 105000, "freelance": 110},
            "devops_engineer": {"fulltime": 90000,  "freelance": 95},
            "product_manager": {"fulltime": 120000, "freelance": 130},
        },
        "india": {
            "ml_engineer":     {"fulltime": 25000, "freelance": 35},
            "ai_researcher":   {"fulltime": 45000, "freelance": 55},
            "data_scientist":  {"fulltime": 22000, "freelance": 30},
            "mlops_engineer":  {"fulltime": 28000, "freelance": 38},
            "devops_engineer": {"fulltime": 20000, "freelance": 28},
            "product_manager": {"fulltime": 35000, "freelance": 45},
        },
        "asia": {
            "ml_engineer":     {"fulltime": 55000, "freelance": 65},
            "ai_researcher":   {"fulltime": 95000, "freelance": 110},
            "data_scientist":  {"fulltime": 48000, "freelance": 55},
            "mlops_engineer":  {"fulltime": 58000, "freelance": 68},
            "devops_engineer": {"fulltime": 45000, "freelance": 52},
            "product_manager": {"fulltime": 75000, "freelance": 85},
        },
    },

    "WORK_HOURS_PER_MONTH": 160,
    "REMOTE_MULTIPLIER": 0.85,      # 15% remote/hybrid discount

    # Informational only, never used in arithmetic
    "PROJECT_TYPES": {
        "rag-system": "RAG System Implementation",
        "llm-finetuning": "LLM Fine-tuning",
        "agentic-pipeline": "Agentic AI Pipeline",
        "computer-vision": "Computer Vision",
        "custom": "Custom AI Project",
    },
    "REGION_LABELS": {
        "us": "United States",
        "eu": "Europe/UK",
        "india": "India",
        "asia": "Southeast Asia",
    },
    "EMPLOYMENT_LABELS": {
        "fulltime": "Full-time",
        "freelance": "Freelance",
    },

    "DEFAULTS": {
        "project_type": "rag-system",
        "region": "us",
        "employment_type": "fulltime",
        "project_duration": 6,
        "headcount": {
            "ml_engineer": 2,
            "ai_researcher": 1,
            "data_scientist": 1,
            "mlops_engineer": 1,
            "devops_engineer": 1,
            "product_manager": 1,
        },
        "remote_work": False,
    },

    "FALLBACKS": {
        "project_duration": 1,
        "headcount": 0,
    },

    "LIMITS": {
        "project_duration": 600,
        "headcount": 100000,
    },
}

# =============================================================================
# 3. ROBOT PARAMETERS (AI Robotics Project)
# =============================================================================
ROBOT = {
    "COMPUTE_MODULES": ["orin-nx", "orin-agx"],
    "LIDAR_TYPES": ["ouster-os1", "velodyne-vlp16"],
    "CLOUD_REGIONS": ["us-east", "us-west", "eu-west"],

    # Jetson compute module price (USD)
    "MODULE_PRICES": {
        "orin-nx": 399,
        "orin-agx": 1999,
    },

    "LIDAR_PRICES": {
        "ouster-os1": 5000,
        "velodyne-vlp16": 4000,
    },

    # GPU training instance rate (USD per hour)
    "CLOUD_RATES": {
        "us-east": 2.50,
        "us-west": 2.75,
        "eu-west": 3.20,
    },

    "LICENSE_COST_PER_SEAT": 2000,   # Omniverse, per developer
    "CAMERA_COST": 350,              # RGB-D camera
    "ACTUATOR_COST": 200,            # servo motor
    "MICROCONTROLLER_COST": 40,
    "PROTOTYPE_COST": 1500,
    "CHASSIS_COST": 20000,
    "AVERAGE_DRAW_KW": 0.1,          # 100 W average draw

    "MODULE_LABELS": {
        "orin-nx": "Jetson Orin NX (8GB) - $399",
        "orin-agx": "Jetson Orin AGX (32GB) - $1,999",
    },
    "LIDAR_LABELS": {
        "ouster-os1": "Ouster OS1-64 - $5,000",
        "velodyne-vlp16": "Velodyne VLP-16 - $4,000",
    },
    "CLOUD_REGION_LABELS": {
        "us-east": "US East - $2.50/hr",
        "us-west": "US West - $2.75/hr",
        "eu-west": "EU West - $3.20/hr",
    },

    "DEFAULTS": {
        "team_size": 5,
        "compute_module": "orin-nx",
        "lidar_type": "ouster-os1",
        "camera_count": 2,
        "actuator_count": 6,
        "training_hours": 100,
        "prototypes": 2,
        "cloud_region": "us-east",
        "power_cost": 0.15,
    },

    "FALLBACKS": {
        "team_size": 0,
        "camera_count": 0,
        "actuator_count": 0,
        "training_hours": 0,
        "prototypes": 0,
        "power_cost": 0.0,
    },

    "LIMITS": {
        "team_size": 100000,
        "camera_count": 10000,
        "actuator_count": 10000,
        "training_hours": 10000000,
        "prototypes": 100000,
        "power_cost": 10.0,
    },
}
