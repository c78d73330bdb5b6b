"""
AI Cost Compass - Export Engine
Renders cost breakdowns as text reports, tables, Excel workbooks and a ZIP bundle.
"""

import io
import zipfile
import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from typing import Dict, Any, List, Optional, Tuple

from config import EXPORT_FILENAMES
from pricing_parameters import COMMON

Row = Tuple[str, str, Optional[float]]


# =============================================================================
# NUMBER FORMATTING
# =============================================================================

def format_number(value) -> str:
    """Group thousands and keep at most three decimals, trailing zeros trimmed."""
    rounded = round(float(value), 3)
    if rounded == int(rounded):
        return f"{int(rounded):,}"
    return f"{rounded:,.3f}".rstrip('0').rstrip('.')


def format_currency(value) -> str:
    """Format a dollar amount, e.g. 40720.4 -> '$40,720.4'."""
    return f"${format_number(value)}"


def format_power(value) -> str:
    """Power figures always carry one decimal."""
    return f"{value:.1f}"


# =============================================================================
# TEXT REPORTS
# =============================================================================

def format_factory_report(config: Dict[str, Any], breakdown: Optional[Dict[str, Any]]) -> Optional[str]:
    """Render the data center report. Returns None when nothing was calculated."""
    if not breakdown:
        return None

    infra = breakdown['infrastructure']
    compute = breakdown['compute']
    operating = breakdown['operating']
    totals = breakdown['totals']

    lines = [
        "AI Data Center Cost Analysis Report",
        "===================================",
        "",
        "Facility Configuration:",
        f"- Size: {format_number(config['facility_size'])} sq ft",
        f"- Region: {config['region'].upper()}",
        f"- Racks: {config['rack_count']}",
        f"- GPU Type: {config['gpu_type'].upper()}",
        f"- GPUs per Rack: {config['gpu_per_rack']}",
        f"- Total GPUs: {format_number(compute['gpu_count'])}",
        f"- IT Load: {format_power(compute['total_power_kw'])} kW",
        f"- PUE: {config['pue']}",
        f"- Power Draw: {format_power(compute['total_power_with_pue'])} kW (with PUE)",
        f"- Staff: {config['staff_count']}",
        "",
        "Capital Expenditure (CAPEX):",
        f"- Building Construction: {format_currency(breakdown['building'])}",
        f"- Infrastructure: {format_currency(infra['total'])}",
        f"  - Racks: {format_currency(infra['racks'])}",
        f"  - Networking: {format_currency(infra['networking'])}",
        f"  - Cooling: {format_currency(infra['cooling'])}",
        f"  - Backup Power: {format_currency(infra['backup'])}",
        f"- GPU Hardware: {format_currency(compute['gpu_cost'])}",
        f"- Total CAPEX: {format_currency(totals['capex'])}",
        "",
        "Operating Expenditure (OPEX - Annual):",
        f"- Electricity: {format_currency(operating['annual_power'])}",
        f"- Staffing: {format_currency(operating['annual_staff'])}",
        f"- Total Annual OPEX: {format_currency(totals['opex_annual'])}",
        "",
        f"5-Year Total Cost of Ownership: {format_currency(totals['five_year_tco'])}",
    ]
    return '\n'.join(lines) + '\n'


def format_manpower_report(config: Dict[str, Any], breakdown: Optional[Dict[str, Any]]) -> Optional[str]:
    """
    Render the team cost report.

    Role lines show the unit cost before the remote discount and the role
    total after it.
    """
    if not breakdown:
        return None

    lines = [
        "AI Manpower Cost Analysis Report",
        "================================",
        "",
        "Project Configuration:",
        f"- Type: {config['project_type']}",
        f"- Region: {config['region'].upper()}",
        f"- Employment: {config['employment_type']}",
        f"- Duration: {config['project_duration']} months",
        f"- Team Size: {breakdown['team_size']} people",
        f"- Remote Work: {'Yes' if config['remote_work'] else 'No'}",
        "",
        "Team Composition:",
    ]

    if breakdown['roles']:
        for role in breakdown['roles'].values():
            lines.append(
                f"- {role['name']}: {role['count']} @ {format_currency(role['unit_cost'])}/month"
                f" = {format_currency(role['total_cost'])}"
            )
    else:
        lines.append("- No roles staffed")

    avg = breakdown['avg_cost_per_person']
    avg_text = f"{format_currency(avg)}/month" if avg is not None else "N/A"

    lines += [
        "",
        "Cost Summary:",
        f"- Monthly Cost: {format_currency(breakdown['monthly'])}",
        f"- Total Project Cost: {format_currency(breakdown['total'])}",
        f"- Average Cost per Person: {avg_text}",
    ]
    return '\n'.join(lines) + '\n'


def format_robot_report(config: Dict[str, Any], breakdown: Optional[Dict[str, Any]]) -> Optional[str]:
    """Render the robot project report. Returns None when nothing was calculated."""
    if not breakdown:
        return None

    hardware = breakdown['hardware']

    lines = [
        "AI Robot Cost Analysis Report",
        "=============================",
        "",
        "Project Configuration:",
        f"- Team Size: {config['team_size']} developers",
        f"- Jetson Model: {config['compute_module'].upper()}",
        f"- LiDAR: {config['lidar_type']}",
        f"- Cameras: {config['camera_count']}",
        f"- Actuators: {config['actuator_count']}",
        f"- Prototypes: {config['prototypes']}",
        f"- Training Hours: {config['training_hours']}",
        f"- Cloud Region: {config['cloud_region']}",
        "",
        "Cost Breakdown:",
        f"- Licensing (Omniverse): {format_currency(breakdown['licensing'])}",
        f"- Hardware Total: {format_currency(hardware['total'])}",
        f"  - Jetson: {format_currency(hardware['compute_module'])}",
        f"  - LiDAR: {format_currency(hardware['lidar'])}",
        f"  - Cameras: {format_currency(hardware['cameras'])}",
        f"  - Actuators: {format_currency(hardware['actuators'])}",
        f"  - Microcontroller: {format_currency(hardware['microcontroller'])}",
        f"- Training (AWS): {format_currency(breakdown['training'])}",
        f"- Prototyping: {format_currency(breakdown['prototyping'])}",
        f"- Chassis: {format_currency(breakdown['chassis'])}",
        f"- Annual Power: {format_currency(breakdown['annual_power'])}",
        "",
        f"TOTAL PROJECT COST: {format_currency(breakdown['total'])}",
    ]
    return '\n'.join(lines) + '\n'


REPORT_FORMATTERS = {
    'factory': format_factory_report,
    'manpower': format_manpower_report,
    'robot': format_robot_report,
}


def build_report(calc_id: str, config: Dict[str, Any], breakdown: Optional[Dict[str, Any]]) -> Optional[str]:
    """Dispatch to the text formatter of a calculator."""
    return REPORT_FORMATTERS[calc_id](config, breakdown)


# =============================================================================
# TABULAR BREAKDOWNS
# =============================================================================

def factory_rows(breakdown: Dict[str, Any]) -> List[Row]:
    """Flatten a factory breakdown into (section, item, amount) rows."""
    infra = breakdown['infrastructure']
    operating = breakdown['operating']
    totals = breakdown['totals']
    return [
        ('CAPEX', 'Building Construction', breakdown['building']),
        ('CAPEX', 'Racks', infra['racks']),
        ('CAPEX', 'Networking', infra['networking']),
        ('CAPEX', 'Cooling', infra['cooling']),
        ('CAPEX', 'Backup Power', infra['backup']),
        ('CAPEX', 'GPU Hardware', breakdown['compute']['gpu_cost']),
        ('CAPEX', 'Total CAPEX', totals['capex']),
        ('OPEX (Annual)', 'Electricity', operating['annual_power']),
        ('OPEX (Annual)', 'Staffing', operating['annual_staff']),
        ('OPEX (Annual)', 'Total Annual OPEX', totals['opex_annual']),
        ('TCO', '5-Year Total Cost of Ownership', totals['five_year_tco']),
    ]


def manpower_rows(breakdown: Dict[str, Any]) -> List[Row]:
    """Flatten a manpower breakdown; the average is None for an empty team."""
    rows = [('Team', role['name'], role['total_cost']) for role in breakdown['roles'].values()]
    rows += [
        ('Summary', 'Monthly Cost', breakdown['monthly']),
        ('Summary', 'Total Project Cost', breakdown['total']),
        ('Summary', 'Average Cost per Person', breakdown['avg_cost_per_person']),
    ]
    return rows


def robot_rows(breakdown: Dict[str, Any]) -> List[Row]:
    hardware = breakdown['hardware']
    return [
        ('Software', 'Licensing (Omniverse)', breakdown['licensing']),
        ('Hardware', 'Jetson Module', hardware['compute_module']),
        ('Hardware', 'LiDAR Sensor', hardware['lidar']),
        ('Hardware', 'Cameras', hardware['cameras']),
        ('Hardware', 'Actuators', hardware['actuators']),
        ('Hardware', 'Microcontroller', hardware['microcontroller']),
        ('Hardware', 'Hardware Total', hardware['total']),
        ('Development', 'Training (AWS)', breakdown['training']),
        ('Development', 'Prototyping', breakdown['prototyping']),
        ('Development', 'Chassis', breakdown['chassis']),
        ('Operations', 'Annual Power', breakdown['annual_power']),
        ('Total', 'Total Project Cost', breakdown['total']),
    ]


BREAKDOWN_ROWS = {
    'factory': factory_rows,
    'manpower': manpower_rows,
    'robot': robot_rows,
}


def breakdown_to_dataframe(rows: List[Row]) -> pd.DataFrame:
    """Tabulate breakdown rows for display."""
    return pd.DataFrame(rows, columns=['Section', 'Item', 'Amount'])


# =============================================================================
# EXCEL EXPORT
# =============================================================================

def _flatten_config(config: Dict[str, Any]) -> List[Tuple[str, Any]]:
    items = []
    for key, value in config.items():
        if isinstance(value, dict):
            for sub_key, sub_value in value.items():
                items.append((f"{key}.{sub_key}", sub_value))
        else:
            items.append((key, value))
    return items


def create_report_workbook(title: str, config: Dict[str, Any], rows: List[Row]) -> bytes:
    """Create a styled workbook with the cost breakdown and its inputs."""
    wb = Workbook()

    # Styles
    title_font = Font(bold=True, size=14, color="2F5496")
    section_font = Font(bold=True, size=12, color="2F5496")
    header_font = Font(bold=True, color="FFFFFF")
    header_fill = PatternFill(start_color="2F5496", end_color="2F5496", fill_type="solid")
    output_fill = PatternFill(start_color="C6EFCE", end_color="C6EFCE", fill_type="solid")
    ref_fill = PatternFill(start_color="D9D9D9", end_color="D9D9D9", fill_type="solid")
    thin_border = Border(
        left=Side(style='thin'), right=Side(style='thin'),
        top=Side(style='thin'), bottom=Side(style='thin')
    )

    # =========================================================================
    # SHEET 1: COST_BREAKDOWN
    # =========================================================================
    ws1 = wb.active
    ws1.title = "COST_BREAKDOWN"

    ws1['A1'] = title
    ws1['A1'].font = title_font
    ws1['A2'] = "Generated by AI Cost Compass. Inputs are listed on the INPUTS sheet."
    ws1['A2'].font = Font(italic=True, color="666666")

    ws1['A4'] = "COST BREAKDOWN"
    ws1['A4'].font = section_font

    for col, header in enumerate(['Section', 'Item', 'Amount'], start=1):
        cell = ws1.cell(row=5, column=col, value=header)
        cell.font = header_font
        cell.fill = header_fill
        cell.border = thin_border
        cell.alignment = Alignment(horizontal='center')

    for row_idx, (section, item, amount) in enumerate(rows, start=6):
        ws1.cell(row=row_idx, column=1, value=section).border = thin_border
        ws1.cell(row=row_idx, column=2, value=item).border = thin_border

        cell = ws1.cell(row=row_idx, column=3, value=amount if amount is not None else "N/A")
        cell.border = thin_border
        if amount is not None:
            cell.number_format = '$#,##0.00'
        if item.lower().startswith('total') or section in ('TCO', 'Total'):
            cell.fill = output_fill
            cell.font = Font(bold=True)

    ws1.column_dimensions['A'].width = 18
    ws1.column_dimensions['B'].width = 34
    ws1.column_dimensions['C'].width = 22

    # =========================================================================
    # SHEET 2: INPUTS
    # =========================================================================
    ws2 = wb.create_sheet("INPUTS")

    ws2['A1'] = "CONFIGURATION"
    ws2['A1'].font = title_font

    for col, header in enumerate(['Field', 'Value'], start=1):
        cell = ws2.cell(row=3, column=col, value=header)
        cell.font = header_font
        cell.fill = header_fill
        cell.border = thin_border

    for row_idx, (field, value) in enumerate(_flatten_config(config), start=4):
        ws2.cell(row=row_idx, column=1, value=field).border = thin_border
        cell = ws2.cell(row=row_idx, column=2, value=value)
        cell.fill = ref_fill
        cell.border = thin_border

    ws2.column_dimensions['A'].width = 28
    ws2.column_dimensions['B'].width = 18

    buffer = io.BytesIO()
    wb.save(buffer)
    buffer.seek(0)
    return buffer.getvalue()


# =============================================================================
# ZIP BUNDLE
# =============================================================================

def create_reports_zip(snapshots: Dict[str, Dict[str, Any]]) -> bytes:
    """
    Create a ZIP with the text report of every calculated snapshot.

    Args:
        snapshots: calculator id -> {'config': ..., 'result': ...}.
                   Entries without a result are skipped.
    """
    buffer = io.BytesIO()

    with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_DEFLATED) as zf:
        for calc_id in COMMON['CALCULATOR_IDS']:
            snapshot = snapshots.get(calc_id) or {}
            report = build_report(calc_id, snapshot.get('config'), snapshot.get('result'))
            if report is not None:
                zf.writestr(EXPORT_FILENAMES[calc_id], report)

    buffer.seek(0)
    return buffer.getvalue()
