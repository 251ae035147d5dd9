# rir_tracker/catalog.py

# Seed data for the exercise library. Written to storage the first time the
# library is read; after that the stored copy is authoritative.
EXERCISES = [
    {
        "id": "bench-press",
        "name": "Bench Press",
        "muscleGroup": "Chest",
        "equipment": "Barbell",
        "instructions": "Lower the bar to mid-chest with elbows tucked, then press back to lockout.",
    },
    {
        "id": "incline-dumbbell-press",
        "name": "Incline Dumbbell Press",
        "muscleGroup": "Chest",
        "equipment": "Dumbbells",
        "instructions": "On a 30-45 degree bench, press the dumbbells up and slightly together.",
    },
    {
        "id": "cable-fly",
        "name": "Cable Fly",
        "muscleGroup": "Chest",
        "equipment": "Cable",
        "instructions": "With a slight bend in the elbows, bring the handles together in front of the chest.",
    },
    {
        "id": "deadlift",
        "name": "Deadlift",
        "muscleGroup": "Back",
        "equipment": "Barbell",
        "instructions": "Brace, keep the bar close to the legs and stand up by driving the hips forward.",
    },
    {
        "id": "pull-up",
        "name": "Pull-up",
        "muscleGroup": "Back",
        "equipment": "Bodyweight",
        "instructions": "From a dead hang, pull until the chin clears the bar.",
    },
    {
        "id": "barbell-row",
        "name": "Barbell Row",
        "muscleGroup": "Back",
        "equipment": "Barbell",
        "instructions": "Hinge to roughly 45 degrees and row the bar to the lower ribs.",
    },
    {
        "id": "lat-pulldown",
        "name": "Lat Pulldown",
        "muscleGroup": "Back",
        "equipment": "Cable",
        "instructions": "Pull the bar to the upper chest while keeping the torso upright.",
    },
    {
        "id": "squat",
        "name": "Squat",
        "muscleGroup": "Legs",
        "equipment": "Barbell",
        "instructions": "Sit down between the heels to at least parallel, then drive up.",
    },
    {
        "id": "romanian-deadlift",
        "name": "Romanian Deadlift",
        "muscleGroup": "Legs",
        "equipment": "Barbell",
        "instructions": "Push the hips back with soft knees until a deep hamstring stretch, then return.",
    },
    {
        "id": "leg-press",
        "name": "Leg Press",
        "muscleGroup": "Legs",
        "equipment": "Machine",
        "instructions": "Lower the sled under control and press without locking the knees.",
    },
    {
        "id": "leg-curl",
        "name": "Leg Curl",
        "muscleGroup": "Legs",
        "equipment": "Machine",
        "instructions": "Curl the pad toward the glutes and lower slowly.",
    },
    {
        "id": "overhead-press",
        "name": "Overhead Press",
        "muscleGroup": "Shoulders",
        "equipment": "Barbell",
        "instructions": "Press the bar from the front rack to overhead, moving the head through at the top.",
    },
    {
        "id": "lateral-raise",
        "name": "Lateral Raise",
        "muscleGroup": "Shoulders",
        "equipment": "Dumbbells",
        "instructions": "Raise the dumbbells out to the sides up to shoulder height.",
    },
    {
        "id": "face-pull",
        "name": "Face Pull",
        "muscleGroup": "Shoulders",
        "equipment": "Cable",
        "instructions": "Pull the rope toward the face, separating the hands at the end.",
    },
    {
        "id": "barbell-curl",
        "name": "Barbell Curl",
        "muscleGroup": "Arms",
        "equipment": "Barbell",
        "instructions": "Curl the bar without swinging, elbows pinned at the sides.",
    },
    {
        "id": "triceps-pushdown",
        "name": "Triceps Pushdown",
        "muscleGroup": "Arms",
        "equipment": "Cable",
        "instructions": "Extend the elbows fully, keeping the upper arms still.",
    },
    {
        "id": "hammer-curl",
        "name": "Hammer Curl",
        "muscleGroup": "Arms",
        "equipment": "Dumbbells",
        "instructions": "Curl with a neutral grip, palms facing each other.",
    },
    {
        "id": "plank",
        "name": "Plank",
        "muscleGroup": "Core",
        "equipment": "Bodyweight",
        "instructions": "Hold a straight line from head to heels, bracing the abs and glutes.",
    },
    {
        "id": "hanging-leg-raise",
        "name": "Hanging Leg Raise",
        "muscleGroup": "Core",
        "equipment": "Bodyweight",
        "instructions": "From a hang, raise the legs by curling the pelvis up.",
    },
]
