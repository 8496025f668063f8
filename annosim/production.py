"""Production cycles of buildings."""

from annosim.building import BuildingDef, BuildingInstance

PRODUCTION_TICK_MS = 999
MIN_EFFICIENCY = 64
FULL_EFFICIENCY = 128


def _calculate_efficiency(building: BuildingInstance, definition: BuildingDef):
    """Efficiency on a 0-128 scale from the fill level of the input stocks."""
    if definition.input_1_rate == 0 and definition.input_2_rate == 0:
        return FULL_EFFICIENCY
    efficiency = FULL_EFFICIENCY
    capacity = definition.storage_capacity
    if capacity > 0:
        if definition.input_1_rate > 0:
            efficiency = min(efficiency, building.input_1_stock * FULL_EFFICIENCY // capacity)
        if definition.input_2_rate > 0:
            efficiency = min(efficiency, building.input_2_stock * FULL_EFFICIENCY // capacity)
    return min(efficiency, FULL_EFFICIENCY)


def tick_building(building, definition, dt_ms):
    """Advance a building's production; return the amount produced this tick."""
    if not building.active:
        return 0

    building.efficiency = _calculate_efficiency(building, definition)
    if building.efficiency < MIN_EFFICIENCY:
        return 0

    building.production_timer_ms += dt_ms
    if building.production_timer_ms < definition.cycle_time_ms:
        return 0
    building.production_timer_ms -= definition.cycle_time_ms

    if definition.input_1_rate > 0:
        building.input_1_stock = max(building.input_1_stock - definition.input_1_rate, 0)
    if definition.input_2_rate > 0:
        building.input_2_stock = max(building.input_2_stock - definition.input_2_rate, 0)

    produced = definition.output_rate
    building.output_stock = min(building.output_stock + produced, definition.storage_capacity)
    building.total_work += 1
    return produced


def needs_carrier(building, definition):
    """True once the output stock exceeds half the storage capacity."""
    if definition.storage_capacity == 0:
        return False
    return building.output_stock > definition.storage_capacity // 2