"""
AI Cost Compass - Robot Cost Engine
Development cost of an AI robot built on the Jetson / Isaac Sim stack.
"""

from typing import Dict, Any

from pricing_parameters import ROBOT, COMMON


def compute_robot_cost(config: Dict[str, Any]) -> Dict[str, Any]:
    """Calculate robot project cost breakdown from a robot configuration."""
    licensing = config['team_size'] * ROBOT['LICENSE_COST_PER_SEAT']

    module_cost = ROBOT['MODULE_PRICES'][config['compute_module']]
    lidar_cost = ROBOT['LIDAR_PRICES'][config['lidar_type']]
    camera_cost = config['camera_count'] * ROBOT['CAMERA_COST']
    actuator_cost = config['actuator_count'] * ROBOT['ACTUATOR_COST']
    microcontroller_cost = ROBOT['MICROCONTROLLER_COST']
    hardware_total = module_cost + lidar_cost + camera_cost + actuator_cost + microcontroller_cost

    training_cost = config['training_hours'] * ROBOT['CLOUD_RATES'][config['cloud_region']]
    prototyping_cost = config['prototypes'] * ROBOT['PROTOTYPE_COST']
    chassis_cost = ROBOT['CHASSIS_COST']

    # Fixed average draw, independent of the hardware chosen
    annual_power_cost = (COMMON['DAYS_PER_YEAR'] * COMMON['HOURS_PER_DAY']
                         * ROBOT['AVERAGE_DRAW_KW'] * config['power_cost'])

    total_cost = (licensing + hardware_total + training_cost + prototyping_cost
                  + chassis_cost + annual_power_cost)

    return {
        'licensing': licensing,
        'hardware': {
            'compute_module': module_cost,
            'lidar': lidar_cost,
            'cameras': camera_cost,
            'actuators': actuator_cost,
            'microcontroller': microcontroller_cost,
            'total': hardware_total,
        },
        'training': training_cost,
        'prototyping': prototyping_cost,
        'chassis': chassis_cost,
        'annual_power': annual_power_cost,
        'total': total_cost,
    }
