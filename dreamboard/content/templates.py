"""Per-category content tables.

Every table is keyed by ``Category`` and has a ``PERSONAL_GROWTH`` entry,
which is the fallback for unrecognised categories.
"""

from __future__ import annotations

from types import MappingProxyType

from dreamboard.models.vocab import Category, TimeframeBucket

QUOTES: MappingProxyType = MappingProxyType({
    Category.HEALTH_FITNESS: MappingProxyType({
        "success": (
            "Your body can do it. It's your mind you have to convince.",
            "The groundwork for all happiness is good health.",
            "Take care of your body. It's the only place you have to live.",
            "Health is not about the weight you lose, but about the life you gain.",
            "Your fitness is 100% mental. Your body won't go where your mind doesn't push it.",
        ),
        "determination": (
            "Success isn't given. It's earned in the gym.",
            "The pain you feel today will be the strength you feel tomorrow.",
            "Don't stop when you're tired. Stop when you're done.",
            "Your limitation is only your imagination.",
            "Push yourself because no one else is going to do it for you.",
        ),
        "transformation": (
            "Every workout is progress, no matter how small.",
            "Change happens when you decide you are worth the effort.",
            "Your body is your temple. Keep it pure and clean for the soul to reside in.",
            "Transformation isn't a future event. It's a present activity.",
            "The best project you'll ever work on is you.",
        ),
    }),
    Category.CAREER_BUSINESS: MappingProxyType({
        "success": (
            "Success is not final, failure is not fatal: it is the courage to continue that counts.",
            "The way to get started is to quit talking and begin doing.",
            "Innovation distinguishes between a leader and a follower.",
            "Your work is going to fill a large part of your life, and the only way to be truly "
            "satisfied is to do what you believe is great work.",
            "The future belongs to those who believe in the beauty of their dreams.",
        ),
        "leadership": (
            "A leader is one who knows the way, goes the way, and shows the way.",
            "The greatest leader is not necessarily the one who does the greatest things. "
            "He is the one that gets the people to do the greatest things.",
            "Leadership is not about being in charge. It's about taking care of those in your charge.",
            "The art of leadership is saying no, not saying yes. It is very easy to say yes.",
            "Great leaders are willing to sacrifice their own interests for the good of the team.",
        ),
        "entrepreneurship": (
            "The biggest risk is not taking any risk.",
            "Ideas are easy. Implementation is hard.",
            "Don't be afraid to give up the good to go for the great.",
            "The way to get started is to quit talking and begin doing.",
            "Your most unhappy customers are your greatest source of learning.",
        ),
    }),
    Category.RELATIONSHIPS_LOVE: MappingProxyType({
        "self_love": (
            "You yourself, as much as anybody in the entire universe, deserve your love and affection.",
            "To love oneself is the beginning of a lifelong romance.",
            "You are enough just as you are.",
            "Love yourself first and everything else falls into line.",
            "The relationship with yourself sets the tone for every other relationship you have.",
        ),
        "romantic_love": (
            "Being deeply loved by someone gives you strength, while loving someone deeply gives you courage.",
            "The best love is the kind that awakens the soul and makes us reach for more.",
            "Love is not about how much you say 'I love you,' but how much you prove that it's true.",
            "In all the world, there is no heart for me like yours.",
            "Love is friendship that has caught fire.",
        ),
        "family": (
            "Family is not an important thing, it's everything.",
            "The love of a family is life's greatest blessing.",
            "Family means no one gets left behind or forgotten.",
            "A happy family is but an earlier heaven.",
            "Family is where life begins and love never ends.",
        ),
    }),
    Category.TRAVEL_ADVENTURE: MappingProxyType({
        "wanderlust": (
            "Travel is the only thing you buy that makes you richer.",
            "Adventure is worthwhile in itself.",
            "To travel is to live.",
            "The world is a book and those who do not travel read only one page.",
            "Life is short and the world is wide.",
        ),
        "freedom": (
            "Adventure awaits, go find it.",
            "Collect moments, not things.",
            "The journey not the arrival matters.",
            "Travel far enough, you meet yourself.",
            "Don't listen to what they say. Go see.",
        ),
    }),
    Category.PERSONAL_GROWTH: MappingProxyType({
        "wisdom": (
            "The only way to make sense out of change is to plunge into it, move with it, and join the dance.",
            "Yesterday I was clever, so I wanted to change the world. Today I am wise, so I am changing myself.",
            "The greatest revolution of our generation is the discovery that human beings, by changing "
            "the inner attitudes of their minds, can change the outer aspects of their lives.",
            "What lies behind us and what lies before us are tiny matters compared to what lies within us.",
            "Be yourself; everyone else is already taken.",
        ),
        "transformation": (
            "The cave you fear to enter holds the treasure you seek.",
            "You are never too old to set another goal or to dream a new dream.",
            "The only impossible journey is the one you never begin.",
            "Change is the end result of all true learning.",
            "Growth begins at the end of your comfort zone.",
        ),
    }),
})

# Emotion or mood label -> quote sub-theme
QUOTE_THEMES: MappingProxyType = MappingProxyType({
    "success": "success",
    "determination": "determination",
    "transformation": "transformation",
    "leadership": "leadership",
    "love": "romantic_love",
    "self_love": "self_love",
    "wisdom": "wisdom",
    "freedom": "freedom",
    "wanderlust": "wanderlust",
    "excitement": "success",
    "ambition": "leadership",
    "adventure": "freedom",
    "peace": "wisdom",
})

AFFIRMATIONS: MappingProxyType = MappingProxyType({
    Category.HEALTH_FITNESS: (
        "I am becoming healthier and stronger every day",
        "My body is capable of amazing things",
        "I choose foods that nourish and energize me",
        "I am committed to my health and well-being",
        "Every workout makes me more confident",
        "I love and respect my body",
        "Healthy choices come naturally to me",
        "I am transforming my body with love and patience",
    ),
    Category.CAREER_BUSINESS: (
        "I am successful in everything I do",
        "Opportunities flow to me effortlessly",
        "I am a natural leader and innovator",
        "My skills and talents are valued and recognized",
        "I attract abundance through my work",
        "I make decisions with confidence and clarity",
        "Success is my natural state",
        "I am creating the career of my dreams",
    ),
    Category.RELATIONSHIPS_LOVE: (
        "I am worthy of deep, meaningful love",
        "I attract loving, healthy relationships",
        "Love flows freely in my life",
        "I communicate with love and understanding",
        "My heart is open to true connection",
        "I am surrounded by people who support me",
        "I love and accept myself completely",
        "Healthy relationships are natural for me",
    ),
    Category.TRAVEL_ADVENTURE: (
        "The world is full of amazing experiences waiting for me",
        "I am free to explore and discover",
        "Adventure calls and I answer",
        "I create incredible memories wherever I go",
        "Travel enriches my soul and expands my mind",
        "I am brave and curious about the world",
        "Every journey teaches me something new",
        "I embrace new cultures and experiences",
    ),
    Category.PERSONAL_GROWTH: (
        "I am constantly growing and evolving",
        "I embrace change as an opportunity for growth",
        "I am becoming the best version of myself",
        "I learn from every experience",
        "I am wise, confident, and self-aware",
        "I trust my intuition and inner wisdom",
        "I am at peace with who I am becoming",
        "Growth and transformation are natural for me",
    ),
})

# {title} is the dream title as given, {lower} the lower-cased title
DREAM_AFFIRMATIONS = (
    "I am manifesting {lower} with ease",
    "{title} is already mine in divine timing",
    "I am worthy of achieving {lower}",
    "Every day brings me closer to {lower}",
)

# (title trigger, generic word, replacement)
AFFIRMATION_SUBSTITUTIONS = (
    ("weight", "healthier", "at my ideal weight"),
    ("business", "successful", "a successful entrepreneur"),
)

VALUES_AFFIRMATION = "My dreams are aligned with my values of {values}"
BUILD_ON_SUCCESS_STEP = "Build on your past success: {success}"

SUCCESS_METRICS: MappingProxyType = MappingProxyType({
    Category.HEALTH_FITNESS: (
        "Energy levels: High throughout the day",
        "Strength: Can lift [X] pounds",
        "Endurance: Can run [X] miles",
        "Weight: Reach [X] pounds",
        "Body fat: Achieve [X]% body fat",
        "Sleep: 7-8 hours of quality sleep",
        "Nutrition: 5 servings of vegetables daily",
        "Consistency: Workout 4-5 times per week",
    ),
    Category.CAREER_BUSINESS: (
        "Income: Earn $[X] per year",
        "Position: Promoted to [X] role",
        "Skills: Master [X] new competencies",
        "Network: Connect with [X] industry leaders",
        "Revenue: Generate $[X] in sales",
        "Team: Lead a team of [X] people",
        "Recognition: Win [X] award",
        "Growth: Expand into [X] markets",
    ),
    Category.RELATIONSHIPS_LOVE: (
        "Communication: Daily meaningful conversations",
        "Quality time: [X] hours together per week",
        "Intimacy: Deep emotional connection",
        "Support: Mutual encouragement and growth",
        "Fun: Regular date nights and adventures",
        "Trust: Complete honesty and transparency",
        "Future: Shared goals and vision",
        "Love: Express appreciation daily",
    ),
    Category.TRAVEL_ADVENTURE: (
        "Destinations: Visit [X] new countries",
        "Experiences: Try [X] new activities",
        "Budget: Save $[X] for travel",
        "Duration: Take [X] week adventures",
        "Culture: Learn about [X] traditions",
        "Language: Speak basic [X] language",
        "Memories: Document journey in [X] ways",
        "Growth: Step outside comfort zone [X] times",
    ),
    Category.PERSONAL_GROWTH: (
        "Mindfulness: Meditate [X] minutes daily",
        "Learning: Read [X] books per month",
        "Skills: Develop [X] new abilities",
        "Habits: Maintain [X] positive routines",
        "Reflection: Journal [X] times per week",
        "Goals: Achieve [X] major milestones",
        "Relationships: Deepen [X] connections",
        "Peace: Reduce stress by [X]%",
    ),
})

ACTION_STEPS: MappingProxyType = MappingProxyType({
    Category.HEALTH_FITNESS: (
        "Create a weekly workout schedule",
        "Plan healthy meals for the week",
        "Track daily water intake",
        "Set up a morning routine",
        "Find an accountability partner",
        "Measure progress weekly",
        "Research healthy recipes",
        "Schedule regular check-ins",
    ),
    Category.CAREER_BUSINESS: (
        "Update resume and LinkedIn profile",
        "Network with industry professionals",
        "Develop key skills through courses",
        "Set monthly performance goals",
        "Research target companies",
        "Practice interview skills",
        "Build a professional portfolio",
        "Seek mentorship opportunities",
    ),
    Category.RELATIONSHIPS_LOVE: (
        "Practice active listening daily",
        "Schedule regular quality time",
        "Express gratitude and appreciation",
        "Work on personal growth",
        "Communicate needs clearly",
        "Plan meaningful experiences",
        "Show affection in their love language",
        "Create relationship rituals",
    ),
    Category.TRAVEL_ADVENTURE: (
        "Research destinations and costs",
        "Create a travel savings plan",
        "Apply for necessary documents",
        "Learn basic local language",
        "Book accommodations in advance",
        "Create a flexible itinerary",
        "Pack efficiently and smart",
        "Document the journey",
    ),
    Category.PERSONAL_GROWTH: (
        "Establish a daily meditation practice",
        "Read personal development books",
        "Keep a gratitude journal",
        "Set weekly reflection time",
        "Practice new skills regularly",
        "Seek feedback from others",
        "Challenge limiting beliefs",
        "Celebrate small wins",
    ),
})

MILESTONES: MappingProxyType = MappingProxyType({
    Category.HEALTH_FITNESS: (
        "Week 1: Establish consistent routine",
        "Month 1: See initial improvements",
        "Month 3: Reach first major goal",
        "Month 6: Lifestyle fully integrated",
        "Year 1: Maintain long-term success",
    ),
    Category.CAREER_BUSINESS: (
        "Month 1: Complete skill assessment",
        "Month 3: Network with 10 professionals",
        "Month 6: Apply for target positions",
        "Month 9: Secure desired role",
        "Year 1: Excel in new position",
    ),
    Category.RELATIONSHIPS_LOVE: (
        "Week 2: Improve daily communication",
        "Month 1: Establish new routines",
        "Month 3: Deepen emotional connection",
        "Month 6: Navigate challenges together",
        "Year 1: Build strong foundation",
    ),
    Category.TRAVEL_ADVENTURE: (
        "Month 1: Complete trip research",
        "Month 3: Save 50% of travel fund",
        "Month 6: Book flights and accommodation",
        "Month 9: Complete trip preparation",
        "Month 12: Experience the adventure",
    ),
    Category.PERSONAL_GROWTH: (
        "Week 2: Daily practice established",
        "Month 1: Notice positive changes",
        "Month 3: Overcome major obstacle",
        "Month 6: Integrate new habits",
        "Year 1: Transform completely",
    ),
})

VISUAL_CUES: MappingProxyType = MappingProxyType({
    Category.HEALTH_FITNESS: (
        "Progress photos side by side",
        "Healthy meal preparation images",
        "Workout achievement charts",
        "Before and after measurements",
        "Active lifestyle photos",
        "Strength and flexibility poses",
    ),
    Category.CAREER_BUSINESS: (
        "Professional headshot",
        "Success charts and graphs",
        "Inspirational office space",
        "Achievement certificates",
        "Networking event photos",
        "Leadership in action shots",
    ),
    Category.RELATIONSHIPS_LOVE: (
        "Happy couple moments",
        "Meaningful conversation scenes",
        "Shared activity photos",
        "Expressions of love",
        "Future planning visuals",
        "Intimate and caring gestures",
    ),
    Category.TRAVEL_ADVENTURE: (
        "Dream destination photos",
        "Adventure activity shots",
        "Cultural experience images",
        "Travel preparation scenes",
        "Journey documentation",
        "Exploration and discovery",
    ),
    Category.PERSONAL_GROWTH: (
        "Meditation and mindfulness",
        "Learning and education",
        "Self-reflection moments",
        "Growth and transformation",
        "Peaceful and centered states",
        "Wisdom and enlightenment",
    ),
})

POWER_WORDS: MappingProxyType = MappingProxyType({
    Category.HEALTH_FITNESS: ("STRONG", "VIBRANT", "HEALTHY", "ENERGIZED", "TRANSFORMED"),
    Category.CAREER_BUSINESS: ("SUCCESS", "LEADERSHIP", "INNOVATION", "EXCELLENCE", "ACHIEVEMENT"),
    Category.RELATIONSHIPS_LOVE: ("LOVE", "CONNECTION", "HARMONY", "DEVOTION", "PARTNERSHIP"),
    Category.TRAVEL_ADVENTURE: ("ADVENTURE", "FREEDOM", "DISCOVERY", "WANDERLUST", "EXPLORATION"),
    Category.PERSONAL_GROWTH: ("WISDOM", "GROWTH", "TRANSFORMATION", "ENLIGHTENMENT", "PEACE"),
})

REMINDERS = (
    "Review progress weekly",
    "Celebrate small wins daily",
    "Adjust strategy monthly",
    "Visualize success morning and evening",
    "Practice gratitude for current progress",
    "Connect with accountability partner",
    "Document journey with photos/notes",
    "Reflect on lessons learned",
)

MANTRAS = (
    "I am {lower}",
    "{title} flows to me effortlessly",
    "I deserve {lower}",
    "{title} is my reality now",
    "I am grateful for {lower}",
)

# Shorter horizon keeps fewer, more focused steps. None => full plan.
ACTION_STEP_COUNTS: MappingProxyType = MappingProxyType({
    TimeframeBucket.IMMEDIATE: 3,
    TimeframeBucket.SHORT_TERM: 3,
    TimeframeBucket.MEDIUM_TERM: 5,
    TimeframeBucket.LONG_TERM: 7,
    None: 7,
})

# None in the value means the full roadmap
MILESTONE_COUNTS: MappingProxyType = MappingProxyType({
    TimeframeBucket.IMMEDIATE: 1,
    TimeframeBucket.SHORT_TERM: 2,
    TimeframeBucket.MEDIUM_TERM: 3,
    TimeframeBucket.LONG_TERM: None,
    None: None,
})

BASE_AFFIRMATION_COUNT = 4
DREAM_AFFIRMATION_COUNT = 2
QUOTE_COUNT = 3
METRIC_COUNT = 4
VISUAL_CUE_COUNT = 4
REMINDER_COUNT = 4
