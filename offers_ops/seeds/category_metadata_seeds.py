"""Legacy category metadata rows seeded into categoryvibes, categoryoccasions and categoryhashtags"""

MAIN_CATEGORY_SLUGS = [
    "food-dining",
    "fashion",
    "beauty-wellness",
    "grocery-essentials",
    "healthcare",
    "fitness-sports",
    "education-learning",
    "home-services",
    "travel-experiences",
    "entertainment",
    "financial-lifestyle",
]

VIBES_BY_CATEGORY = {
    "food-dining": [
        {"id": "romantic", "name": "Romantic Date", "icon": "💕", "color": "#F43F5E", "description": "Perfect for two"},
        {"id": "family", "name": "Family Feast", "icon": "👨‍👩‍👧‍👦", "color": "#3B82F6", "description": "Meals for everyone"},
        {"id": "quick", "name": "Quick Bite", "icon": "⚡", "color": "#F59E0B", "description": "Fast & delicious"},
        {"id": "healthy", "name": "Healthy Eats", "icon": "🥗", "color": "#10B981", "description": "Nutritious meals"},
        {"id": "party", "name": "Party Mode", "icon": "🎉", "color": "#EC4899", "description": "Celebration feasts"},
        {"id": "comfort", "name": "Comfort Food", "icon": "🍲", "color": "#8B5CF6", "description": "Soul-warming dishes"},
        {"id": "exotic", "name": "Exotic Flavors", "icon": "🌏", "color": "#06B6D4", "description": "World cuisines"},
        {"id": "sweet", "name": "Sweet Tooth", "icon": "🍰", "color": "#D946EF", "description": "Desserts & treats"},
    ],
    "fashion": [
        {"id": "sunny", "name": "Sunny Day", "icon": "☀️", "color": "#FBBF24", "description": "Light & breezy outfits"},
        {"id": "party", "name": "Party Mode", "icon": "🎉", "color": "#EC4899", "description": "Glam & glitter looks"},
        {"id": "romantic", "name": "Romantic", "icon": "💕", "color": "#F43F5E", "description": "Date night ready"},
        {"id": "winter", "name": "Winter Cozy", "icon": "❄️", "color": "#06B6D4", "description": "Warm & stylish layers"},
        {"id": "beach", "name": "Beach Ready", "icon": "🏖️", "color": "#14B8A6", "description": "Summer essentials"},
        {"id": "minimal", "name": "Minimal", "icon": "🤍", "color": "#94A3B8", "description": "Clean & simple"},
        {"id": "artistic", "name": "Artistic", "icon": "🎨", "color": "#8B5CF6", "description": "Bold & creative"},
        {"id": "sporty", "name": "Sporty", "icon": "🏃", "color": "#22C55E", "description": "Active & athletic"},
    ],
    "beauty-wellness": [
        {"id": "glow", "name": "Glow Up", "icon": "✨", "color": "#FBBF24", "description": "Radiant skin routine"},
        {"id": "natural", "name": "Natural Beauty", "icon": "🌿", "color": "#10B981", "description": "Organic products"},
        {"id": "spa", "name": "Spa Day", "icon": "🧖", "color": "#8B5CF6", "description": "Relaxation & pampering"},
        {"id": "bridal", "name": "Bridal Glow", "icon": "👰", "color": "#EC4899", "description": "Wedding-ready looks"},
        {"id": "men", "name": "Men's Care", "icon": "🧔", "color": "#3B82F6", "description": "Grooming essentials"},
        {"id": "hair", "name": "Hair Goals", "icon": "💇", "color": "#D946EF", "description": "Hair treatments"},
        {"id": "wellness", "name": "Inner Wellness", "icon": "🧘", "color": "#14B8A6", "description": "Mind & body balance"},
        {"id": "quick", "name": "Quick Fix", "icon": "⚡", "color": "#F59E0B", "description": "15-min treatments"},
    ],
    "grocery-essentials": [
        {"id": "organic", "name": "Organic", "icon": "🌱", "color": "#10B981", "description": "Chemical-free products"},
        {"id": "fresh", "name": "Farm Fresh", "icon": "🥬", "color": "#22C55E", "description": "Daily fresh produce"},
        {"id": "bulk", "name": "Bulk Buy", "icon": "📦", "color": "#F59E0B", "description": "Stock up & save"},
        {"id": "instant", "name": "Instant Meals", "icon": "⏱️", "color": "#EF4444", "description": "Ready to cook"},
        {"id": "healthy", "name": "Health Foods", "icon": "💪", "color": "#3B82F6", "description": "Nutritious choices"},
        {"id": "baby", "name": "Baby Care", "icon": "👶", "color": "#EC4899", "description": "For little ones"},
        {"id": "pet", "name": "Pet Supplies", "icon": "🐕", "color": "#8B5CF6", "description": "For furry friends"},
        {"id": "cleaning", "name": "Clean Home", "icon": "🧹", "color": "#06B6D4", "description": "Household essentials"},
    ],
}

OCCASIONS_BY_CATEGORY = {
    "food-dining": [
        {"id": "birthday", "name": "Birthday", "icon": "🎂", "color": "#EC4899", "tag": "Popular", "discount": 20},
        {"id": "anniversary", "name": "Anniversary", "icon": "💑", "color": "#F43F5E", "tag": "Romantic", "discount": 25},
        {"id": "corporate", "name": "Corporate", "icon": "🏢", "color": "#3B82F6", "tag": None, "discount": 15},
        {"id": "wedding", "name": "Wedding", "icon": "💒", "color": "#D946EF", "tag": "Premium", "discount": 30},
        {"id": "family", "name": "Family Gathering", "icon": "👨‍👩‍👧‍👦", "color": "#F59E0B", "tag": None, "discount": 18},
        {"id": "eid", "name": "Eid Feast", "icon": "🌙", "color": "#10B981", "tag": "Festive", "discount": 25},
        {"id": "diwali", "name": "Diwali", "icon": "🪔", "color": "#FF9500", "tag": "Coming Soon", "discount": 30},
        {"id": "christmas", "name": "Christmas", "icon": "🎄", "color": "#EF4444", "tag": None, "discount": 22},
    ],
    "fashion": [
        {"id": "wedding", "name": "Wedding", "icon": "💒", "color": "#F43F5E", "tag": "Hot", "discount": 30},
        {"id": "eid", "name": "Eid", "icon": "🌙", "color": "#10B981", "tag": "Trending", "discount": 25},
        {"id": "diwali", "name": "Diwali", "icon": "🪔", "color": "#F59E0B", "tag": "Coming Soon", "discount": 35},
        {"id": "christmas", "name": "Christmas", "icon": "🎄", "color": "#EF4444", "tag": None, "discount": 20},
        {"id": "newyear", "name": "New Year", "icon": "🎊", "color": "#8B5CF6", "tag": None, "discount": 22},
        {"id": "birthday", "name": "Birthday", "icon": "🎂", "color": "#EC4899", "tag": "Special", "discount": 15},
        {"id": "collegefest", "name": "College Fest", "icon": "🎓", "color": "#3B82F6", "tag": "Student", "discount": 28},
        {"id": "office", "name": "Office Party", "icon": "🏢", "color": "#64748B", "tag": None, "discount": 18},
    ],
    "beauty-wellness": [
        {"id": "wedding", "name": "Bridal", "icon": "👰", "color": "#EC4899", "tag": "Premium", "discount": 35},
        {"id": "karwachauth", "name": "Karwa Chauth", "icon": "🌙", "color": "#EF4444", "tag": "Special", "discount": 25},
        {"id": "valentines", "name": "Valentine's", "icon": "💕", "color": "#F43F5E", "tag": "Romantic", "discount": 20},
        {"id": "mothers", "name": "Mother's Day", "icon": "👩", "color": "#D946EF", "tag": None, "discount": 30},
        {"id": "graduation", "name": "Graduation", "icon": "🎓", "color": "#3B82F6", "tag": None, "discount": 18},
        {"id": "interview", "name": "Job Interview", "icon": "💼", "color": "#64748B", "tag": "Quick", "discount": 15},
        {"id": "party", "name": "Party Glam", "icon": "🎉", "color": "#8B5CF6", "tag": None, "discount": 22},
        {"id": "festival", "name": "Festival Look", "icon": "🎪", "color": "#F59E0B", "tag": "Trending", "discount": 28},
    ],
    "grocery-essentials": [
        {"id": "diwali", "name": "Diwali", "icon": "🪔", "color": "#F59E0B", "tag": "Mega Sale", "discount": 40},
        {"id": "eid", "name": "Eid", "icon": "🌙", "color": "#10B981", "tag": "Special", "discount": 30},
        {"id": "holi", "name": "Holi", "icon": "🎨", "color": "#EC4899", "tag": "Colorful", "discount": 25},
        {"id": "christmas", "name": "Christmas", "icon": "🎄", "color": "#EF4444", "tag": None, "discount": 20},
        {"id": "newyear", "name": "New Year", "icon": "🎊", "color": "#8B5CF6", "tag": None, "discount": 22},
        {"id": "party", "name": "House Party", "icon": "🏠", "color": "#3B82F6", "tag": None, "discount": 18},
        {"id": "bbq", "name": "BBQ Night", "icon": "🍖", "color": "#FF6B35", "tag": "Summer", "discount": 15},
        {"id": "breakfast", "name": "Breakfast Pack", "icon": "🍳", "color": "#FBBF24", "tag": "Daily", "discount": 12},
    ],
}

HASHTAGS_BY_CATEGORY = {
    "food-dining": [
        {"id": "1", "tag": "#BiryaniLovers", "count": 2450, "color": "#F59E0B", "trending": True},
        {"id": "2", "tag": "#HealthyEats", "count": 1890, "color": "#10B981", "trending": True},
        {"id": "3", "tag": "#StreetFood", "count": 3200, "color": "#EF4444", "trending": False},
        {"id": "4", "tag": "#CafeVibes", "count": 1560, "color": "#8B5CF6", "trending": False},
        {"id": "5", "tag": "#DateNightDinner", "count": 980, "color": "#EC4899", "trending": True},
        {"id": "6", "tag": "#FoodieFinds", "count": 2100, "color": "#3B82F6", "trending": False},
    ],
    "fashion": [
        {"id": "1", "tag": "#WeddingSeason", "count": 3200, "color": "#F43F5E", "trending": True},
        {"id": "2", "tag": "#StreetStyle", "count": 2800, "color": "#06B6D4", "trending": True},
        {"id": "3", "tag": "#OfficeLooks", "count": 1800, "color": "#64748B", "trending": False},
        {"id": "4", "tag": "#PartyReady", "count": 2400, "color": "#EC4899", "trending": False},
        {"id": "5", "tag": "#SustainableFashion", "count": 1500, "color": "#10B981", "trending": True},
        {"id": "6", "tag": "#EthnicVibes", "count": 3200, "color": "#D946EF", "trending": False},
    ],
    "beauty-wellness": [
        {"id": "1", "tag": "#GlowUp", "count": 4500, "color": "#FBBF24", "trending": True},
        {"id": "2", "tag": "#SkincareRoutine", "count": 3800, "color": "#EC4899", "trending": True},
        {"id": "3", "tag": "#NaturalBeauty", "count": 2200, "color": "#10B981", "trending": False},
        {"id": "4", "tag": "#SpaDay", "count": 1900, "color": "#8B5CF6", "trending": False},
        {"id": "5", "tag": "#BridalGlow", "count": 1600, "color": "#D946EF", "trending": True},
        {"id": "6", "tag": "#SelfCare", "count": 2800, "color": "#14B8A6", "trending": False},
    ],
    "grocery-essentials": [
        {"id": "1", "tag": "#OrganicLiving", "count": 2100, "color": "#10B981", "trending": True},
        {"id": "2", "tag": "#MealPrep", "count": 1800, "color": "#3B82F6", "trending": True},
        {"id": "3", "tag": "#FarmToTable", "count": 1500, "color": "#22C55E", "trending": False},
        {"id": "4", "tag": "#HealthyPantry", "count": 1200, "color": "#F59E0B", "trending": False},
        {"id": "5", "tag": "#BulkBuying", "count": 900, "color": "#8B5CF6", "trending": True},
        {"id": "6", "tag": "#FreshProduce", "count": 1600, "color": "#14B8A6", "trending": False},
    ],
}
