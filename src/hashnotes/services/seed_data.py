"""
Sample notes inserted the first time an empty store is loaded.

Timestamps are relative to the load time so the samples look recent.
"""

from hashnotes.models.note import Note, now_ms
from hashnotes.utils.id_generator import generate_note_id

HOUR_MS = 3_600_000
DAY_MS = 24 * HOUR_MS

_SEED_NOTES: list[dict] = [
    {
        "title": "Instanced Static Mesh Components",
        "content": (
            "ISMs are crucial for **performance optimization** in UE5. They render "
            "thousands of identical meshes with minimal draw calls. Perfect for "
            "foliage, rocks and debris.\n\n"
            "## Key Benefits\n\n"
            "- Single draw call for multiple instances\n"
            "- GPU-based culling\n"
            "- LOD transitions\n\n"
            "```cpp\n"
            "UInstancedStaticMeshComponent* ISMComponent;\n"
            "ISMComponent->AddInstance(Transform);\n"
            "```\n\n"
            "> Always batch your instances for maximum performance gains!"
        ),
        "hashtags": ["#Blueprints", "#UE5", "#Performance"],
        "keywords": ["ISM", "Add Instance", "performance", "draw calls"],
        "blueprint_nodes": ["Add Instance", "ForEachLoop", "Get Instance Transform"],
        "definitions": (
            "Efficiently renders many identical mesh instances using hardware "
            "instancing to reduce draw calls."
        ),
        "color": "bg-green-100",
        "pinned": True,
        "created_ago": 7 * DAY_MS,
        "updated_ago": 2 * DAY_MS,
    },
    {
        "title": "Widget Switcher Basics",
        "content": (
            "Widget Switcher is essential for UI state management. It switches "
            "between panels or screens in your UI.\n\n"
            "Common use cases:\n- Menu systems\n- Inventory tabs\n"
            "- Settings panels\n- Loading screens"
        ),
        "hashtags": ["#UI", "#Blueprints", "#UMG"],
        "keywords": ["Widget Switcher", "visibility", "UI panels", "menu"],
        "blueprint_nodes": ["SetActiveWidgetIndex", "Get Active Widget Index"],
        "definitions": (
            "A container widget that shows only one of its child widgets at a "
            "time, useful for tabbed interfaces."
        ),
        "color": "bg-blue-100",
        "pinned": False,
        "created_ago": 5 * DAY_MS,
        "updated_ago": 1 * DAY_MS,
    },
    {
        "title": "Material Parameter Collections",
        "content": (
            "MPCs hold **global parameters** that many materials read at once. "
            "Great for time of day systems and weather effects.\n\n"
            "1. Create a Material Parameter Collection asset\n"
            "2. Add scalar/vector parameters\n"
            "3. Reference them with the `Collection Parameter` node\n"
            "4. Modify at runtime from Blueprint"
        ),
        "hashtags": ["#Materials", "#UE5"],
        "keywords": ["MPC", "global parameters", "time of day", "weather"],
        "blueprint_nodes": ["Set Scalar Parameter Value", "Set Vector Parameter Value"],
        "definitions": (
            "Global material parameters shared across multiple materials and "
            "modified at runtime."
        ),
        "color": "bg-purple-100",
        "pinned": True,
        "created_ago": 4 * DAY_MS,
        "updated_ago": 3 * DAY_MS,
    },
    {
        "title": "Niagara Spawn Burst",
        "content": (
            "Spawn Burst creates an immediate burst of particles, perfect for "
            "explosions, impacts or one-shot effects.\n\n"
            "Key parameters:\n- Spawn Count\n- Spawn Time\n- Loop Behavior"
        ),
        "hashtags": ["#Niagara", "#VFX"],
        "keywords": ["burst", "emitter", "particles", "explosion"],
        "blueprint_nodes": ["Spawn System Attached", "Set Niagara Variable"],
        "definitions": (
            "A Niagara module that spawns a specific number of particles "
            "instantly at a given time."
        ),
        "color": "bg-amber-100",
        "pinned": False,
        "created_ago": 3 * DAY_MS,
        "updated_ago": 1 * DAY_MS,
    },
    {
        "title": "Essential Editor Shortcuts",
        "content": (
            "**Navigation:**\n- F: Focus on selected object\n- G: Game view toggle\n"
            "- End: Drop to floor\n\n"
            "**Selection:**\n- H: Hide selected\n- Ctrl+H: Hide unselected\n"
            "- Shift+H: Unhide all\n\n"
            "**Viewport:**\n- F11: Immersive mode\n- Alt+G: Perspective/Orthographic toggle"
        ),
        "hashtags": ["#Editor", "#Workflow"],
        "keywords": ["shortcuts", "hotkeys", "navigation", "viewport"],
        "blueprint_nodes": [],
        "definitions": "Keyboard shortcuts that improve editor navigation and workflow efficiency.",
        "color": "bg-gray-100",
        "pinned": False,
        "created_ago": 2 * DAY_MS,
        "updated_ago": 1 * DAY_MS,
    },
    {
        "title": "C++ Actor Component Basics",
        "content": (
            "Creating reusable components in C++ for Blueprint integration.\n\n"
            "Key macros:\n- UCLASS: Makes class available to UE\n"
            "- UPROPERTY: Exposes variables\n"
            "- UFUNCTION: Exposes functions to Blueprint"
        ),
        "hashtags": ["#C++", "#Blueprints", "#Programming"],
        "keywords": ["component", "UCLASS", "UPROPERTY", "UFUNCTION"],
        "blueprint_nodes": [],
        "definitions": (
            "Custom C++ components that can be attached to actors and exposed "
            "to the Blueprint system."
        ),
        "color": "bg-pink-100",
        "pinned": False,
        "created_ago": 1 * DAY_MS,
        "updated_ago": 1 * HOUR_MS,
    },
    {
        "title": "Blueprint Event Dispatchers",
        "content": (
            "Event Dispatchers let Blueprint classes communicate without direct "
            "references.\n\n"
            "1. Create an Event Dispatcher\n2. Call it when the event occurs\n"
            "3. Bind to it in other Blueprints\n4. Handle the event"
        ),
        "hashtags": ["#Blueprints", "#Events"],
        "keywords": ["event dispatcher", "communication", "events", "binding"],
        "blueprint_nodes": ["Call", "Bind Event", "Unbind Event"],
        "definitions": (
            "A Blueprint system for broadcasting events to multiple listeners "
            "without direct object references."
        ),
        "color": "bg-green-100",
        "pinned": False,
        "created_ago": 12 * HOUR_MS,
        "updated_ago": 2 * HOUR_MS,
    },
    {
        "title": "Landscape Auto-Material Setup",
        "content": (
            "Automatic landscape materials based on slope and height:\n\n"
            "1. Create a landscape material with layer blend nodes\n"
            "2. Use World Position and Landscape Layer Coords\n"
            "3. Detect slope with DDX/DDY nodes\n"
            "4. Paint landscape layers in the editor\n\n"
            "Tip: combine slope + height with noise for natural results."
        ),
        "hashtags": ["#Landscapes", "#Materials", "#Terrain"],
        "keywords": ["auto material", "slope", "height", "layer blend"],
        "blueprint_nodes": [],
        "definitions": (
            "Automatic material assignment for landscapes based on slope angle "
            "and world height."
        ),
        "color": "bg-amber-100",
        "pinned": False,
        "created_ago": 6 * HOUR_MS,
        "updated_ago": 1 * HOUR_MS,
    },
]


def build_seed_notes(now: int | None = None) -> list[Note]:
    """
    Build the sample note set with fresh ids.

    Args:
        now: Reference time in ms (defaults to the current time)

    Returns:
        Sample notes
    """
    now = now_ms() if now is None else now
    notes = []
    for seed in _SEED_NOTES:
        fields = {k: v for k, v in seed.items() if k not in ("created_ago", "updated_ago")}
        notes.append(
            Note(
                id=generate_note_id(),
                created_at=now - seed["created_ago"],
                updated_at=now - seed["updated_ago"],
                **fields,
            )
        )
    return notes
