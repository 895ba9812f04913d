"""Mall categories and brands for the brand partnerships section"""

MALL_CATEGORIES = [
    {
        "name": "Fashion",
        "slug": "fashion",
        "icon": "shirt-outline",
        "color": "#EC4899",
        "backgroundColor": "#FDF2F8",
        "maxCashback": 15,
        "sortOrder": 1,
        "isFeatured": True,
    },
    {
        "name": "Electronics",
        "slug": "electronics",
        "icon": "phone-portrait-outline",
        "color": "#3B82F6",
        "backgroundColor": "#EFF6FF",
        "maxCashback": 10,
        "sortOrder": 2,
        "isFeatured": True,
    },
    {
        "name": "Food & Beverages",
        "slug": "food-beverages",
        "icon": "fast-food-outline",
        "color": "#F97316",
        "backgroundColor": "#FFF7ED",
        "maxCashback": 20,
        "sortOrder": 3,
        "isFeatured": True,
    },
]

MALL_BRANDS = [
    {
        "name": "Nike",
        "slug": "nike",
        "description": "Just Do It - Global sportswear and athletic footwear leader",
        "logo": "https://upload.wikimedia.org/wikipedia/commons/thumb/a/a6/Logo_NIKE.svg/1200px-Logo_NIKE.svg.png",
        "tier": "premium",
        "cashback": {"percentage": 8, "maxAmount": 2000, "minPurchase": 1500},
        "badges": ["verified", "trending"],
        "categorySlug": "fashion",
        "tags": ["sportswear", "shoes", "athletic", "sneakers"],
        "externalUrl": "https://www.nike.com/in",
    },
    {
        "name": "Apple",
        "slug": "apple",
        "description": "Think Different - Premium technology products and services",
        "logo": "https://upload.wikimedia.org/wikipedia/commons/thumb/f/fa/Apple_logo_black.svg/800px-Apple_logo_black.svg.png",
        "tier": "luxury",
        "cashback": {"percentage": 3, "maxAmount": 10000, "minPurchase": 10000},
        "badges": ["exclusive", "premium", "verified"],
        "categorySlug": "electronics",
        "tags": ["electronics", "technology", "premium", "iphone", "macbook"],
        "externalUrl": "https://www.apple.com/in",
    },
    {
        "name": "Starbucks",
        "slug": "starbucks",
        "description": "Inspiring and nurturing the human spirit - one cup at a time",
        "logo": "https://upload.wikimedia.org/wikipedia/en/thumb/d/d3/Starbucks_Corporation_Logo_2011.svg/1200px-Starbucks_Corporation_Logo_2011.svg.png",
        "tier": "standard",
        "cashback": {"percentage": 10, "maxAmount": 200, "minPurchase": 200},
        "badges": ["trending", "verified"],
        "categorySlug": "food-beverages",
        "tags": ["coffee", "beverages", "cafe", "drinks"],
        "externalUrl": "https://www.starbucks.in",
    },
    {
        "name": "Zara",
        "slug": "zara",
        "description": "Fast fashion for the modern world - Latest trends at affordable prices",
        "logo": "https://upload.wikimedia.org/wikipedia/commons/thumb/f/fd/Zara_Logo.svg/1200px-Zara_Logo.svg.png",
        "tier": "premium",
        "cashback": {"percentage": 12, "maxAmount": 1500, "minPurchase": 1000},
        "badges": ["new", "trending"],
        "categorySlug": "fashion",
        "tags": ["fashion", "clothing", "apparel", "trendy"],
        "externalUrl": "https://www.zara.com/in",
    },
    {
        "name": "Samsung",
        "slug": "samsung",
        "description": "Inspire the world, create the future - Innovation for everyone",
        "logo": "https://upload.wikimedia.org/wikipedia/commons/thumb/2/24/Samsung_Logo.svg/1280px-Samsung_Logo.svg.png",
        "tier": "premium",
        "cashback": {"percentage": 5, "maxAmount": 15000, "minPurchase": 5000},
        "badges": ["verified", "top-rated"],
        "categorySlug": "electronics",
        "tags": ["electronics", "technology", "mobile", "tv", "appliances"],
        "externalUrl": "https://www.samsung.com/in",
    },
    {
        "name": "Dominos",
        "slug": "dominos",
        "description": "Hot fresh pizza delivered to your door in 30 minutes",
        "logo": "https://upload.wikimedia.org/wikipedia/commons/thumb/7/74/Dominos_pizza_logo.svg/1200px-Dominos_pizza_logo.svg.png",
        "tier": "standard",
        "cashback": {"percentage": 15, "maxAmount": 150, "minPurchase": 300},
        "badges": ["trending"],
        "categorySlug": "food-beverages",
        "tags": ["pizza", "food", "delivery", "fast-food"],
        "externalUrl": "https://www.dominos.co.in",
    },
]
