from pathlib import Path

# Define project root (where this file is located)
ROOT_DIR = Path(__file__).parent.resolve()

# Page settings
PAGE_TITLE = "AI Cost Compass"
PAGE_ICON = "🧮"
LAYOUT = "wide"

# Calculator registry, in dashboard order
CALCULATORS = [
    {
        'id': 'robot',
        'title': 'AI Robot Cost Calculator',
        'description': 'Calculate costs for AI robots using NVIDIA Digital Twin and Isaac Sim stack',
        'icon': '🤖',
    },
    {
        'id': 'factory',
        'title': 'AI Factory Cost Calculator',
        'description': 'Estimate costs for AI data centers and GPU clusters',
        'icon': '🏭',
    },
    {
        'id': 'manpower',
        'title': 'AI Manpower Cost Calculator',
        'description': 'Calculate global manpower costs for AI teams and projects',
        'icon': '👥',
    },
]

FEATURES = [
    ("Industry Benchmarks", "Based on 2024-2025 market data from leading companies"),
    ("Regional Pricing", "Accurate costs across USA, EU, Asia, and emerging markets"),
    ("Real-time Updates", "Dynamic calculations with instant cost breakdowns"),
    ("Export Results", "Download detailed reports for stakeholder presentations"),
]

# Export file names
EXPORT_FILENAMES = {
    'factory': 'ai-datacenter-cost-analysis.txt',
    'manpower': 'ai-manpower-cost-analysis.txt',
    'robot': 'ai-robot-cost-analysis.txt',
}
EXCEL_FILENAMES = {
    'factory': 'ai-datacenter-cost-analysis.xlsx',
    'manpower': 'ai-manpower-cost-analysis.xlsx',
    'robot': 'ai-robot-cost-analysis.xlsx',
}
ZIP_FILENAME = 'ai-cost-reports.zip'

TEXT_MIME = 'text/plain'
EXCEL_MIME = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
ZIP_MIME = 'application/zip'


def get_calculator(calc_id: str) -> dict:
    """
    Look up a calculator entry by id.

    Raises KeyError when the id is not registered.
    """
    for calc in CALCULATORS:
        if calc['id'] == calc_id:
            return calc
    raise KeyError(f"Unknown calculator '{calc_id}'. Expected one of: {[c['id'] for c in CALCULATORS]}")
