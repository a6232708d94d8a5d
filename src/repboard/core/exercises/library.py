"""
Built-in exercise list, in display order.
"""

from .base import ExerciseInfo

DEFAULT_EXERCISES: tuple[ExerciseInfo, ...] = (
    ExerciseInfo("Barbell Bench Press", "Chest", "Classic compound chest movement.",
                 "intermediate", "Barbell", ("Triceps", "Shoulders"),
                 instructions="Lie on a flat bench, grip the bar slightly wider than shoulder-width, "
                              "lower to chest and press up."),
    ExerciseInfo("Pull-Up", "Back", "Upper body pulling compound movement.",
                 "intermediate", "Pull-up bar", ("Biceps",),
                 instructions="Hang from a bar with overhand grip, pull chin above bar, lower with control."),
    ExerciseInfo("Squat", "Legs", "King of leg exercises.",
                 "intermediate", "Barbell", ("Glutes", "Core"),
                 instructions="Bar on traps, feet shoulder-width, descend until thighs are parallel, "
                              "drive up through heels."),
    ExerciseInfo("Deadlift", "Back", "Full-body compound pull.",
                 "advanced", "Barbell", ("Legs", "Core", "Glutes"),
                 instructions="Hip-width stance, hinge at hips, flat back, pull bar from floor to lockout."),
    ExerciseInfo("Overhead Press", "Shoulders", "Vertical pressing movement.",
                 "intermediate", "Barbell", ("Triceps", "Core"),
                 instructions="Bar at shoulder height, press overhead to full lockout, lower under control."),
    ExerciseInfo("Dumbbell Row", "Back", "Unilateral back rowing exercise.",
                 "beginner", "Dumbbell", ("Biceps",),
                 instructions="Knee and hand on bench, pull dumbbell to hip, lower with control."),
    ExerciseInfo("Incline Dumbbell Press", "Chest", "Upper chest focus.",
                 "beginner", "Dumbbell", ("Shoulders", "Triceps"),
                 instructions="Set bench to 30-45°, press dumbbells from shoulder height to full extension."),
    ExerciseInfo("Romanian Deadlift", "Legs", "Hip hinge for hamstrings.",
                 "intermediate", "Barbell", ("Glutes", "Back"),
                 instructions="Slight knee bend, hinge at hips pushing them back, lower bar along legs, "
                              "squeeze glutes to return."),
    ExerciseInfo("Bicep Curl", "Arms", "Classic arm isolation movement.",
                 "beginner", "Dumbbell",
                 instructions="Stand with dumbbells, curl to shoulder height, lower with control."),
    ExerciseInfo("Tricep Dips", "Arms", "Bodyweight tricep builder.",
                 "beginner", "Parallel bars", ("Chest", "Shoulders"),
                 instructions="Grip parallel bars, lower until arms are 90°, press back up."),
    ExerciseInfo("Leg Press", "Legs", "Machine-based quad dominant movement.",
                 "beginner", "Machine", ("Glutes",),
                 instructions="Feet shoulder-width on platform, lower sled until 90°, press back up."),
    ExerciseInfo("Cable Fly", "Chest", "Cable chest isolation.",
                 "beginner", "Cable machine",
                 instructions="Stand between cables at shoulder height, arc arms together in front, "
                              "return slowly."),
    ExerciseInfo("Face Pull", "Shoulders", "Rear delt and rotator cuff health exercise.",
                 "beginner", "Cable machine", ("Upper Back",),
                 instructions="Set cable to face height, pull to forehead with elbows high, "
                              "retract shoulder blades."),
    ExerciseInfo("Plank", "Core", "Static core endurance exercise.",
                 "beginner", "none",
                 instructions="Forearms on floor, body in straight line from head to toe, hold position."),
    ExerciseInfo("Hanging Leg Raise", "Core", "Dynamic ab flexion movement.",
                 "intermediate", "Pull-up bar",
                 instructions="Hang from pull-up bar, raise legs to 90° (or higher), lower with control."),
    ExerciseInfo("Lateral Raise", "Shoulders", "Side delt isolation.",
                 "beginner", "Dumbbell",
                 instructions="Hold dumbbells at sides, raise to shoulder height with slightly bent arms, "
                              "lower slowly."),
    ExerciseInfo("Calf Raise", "Legs", "Calf muscle isolation.",
                 "beginner", "none",
                 instructions="Stand on edge of step or flat ground, rise up on toes, lower fully."),
    ExerciseInfo("Hip Thrust", "Glutes", "Glute dominant hip extension.",
                 "intermediate", "Barbell", ("Hamstrings", "Core"),
                 instructions="Upper back on bench, bar across hips, drive hips up to full extension, "
                              "squeeze glutes at top."),
)
