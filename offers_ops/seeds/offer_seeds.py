"""Seed data for the offers page: flash sales, promo coupons, friend redemptions and exclusive offers"""

from offers_ops.models.mongodb_schemas import FlashSaleStatus, TargetAudience

# Store key -> case-insensitive name fragment used to find the store
STORE_NAME_FRAGMENTS = {
    "starbucks": "starbucks",
    "kfc": "kfc",
    "mcdonalds": "mcdonald",
    "dominos": "domino",
    "mojo_pizza": "mojo",
}

# Lightning deals; "hours" is the sale length from seeding time
FLASH_SALE_DEALS = [
    {
        "store": "dominos",
        "title": "Flash Pizza Deal",
        "description": "Large Pizza + 2 Sides - Limited time offer! Get our best-selling pizza combo at an unbeatable price.",
        "image": "https://images.unsplash.com/photo-1565299624946-b28f40a0ae38?w=400",
        "banner": "https://images.unsplash.com/photo-1565299624946-b28f40a0ae38?w=800",
        "discountPercentage": 33,
        "priority": 10,
        "hours": 2,
        "maxQuantity": 100,
        "soldQuantity": 67,
        "limitPerUser": 2,
        "lowStockThreshold": 20,
        "originalPrice": 15,
        "flashSalePrice": 10,
        "status": FlashSaleStatus.ACTIVE.value,
        "termsAndConditions": [
            "Valid for dine-in and delivery",
            "Cannot be combined with other offers",
            "Valid until stock lasts",
        ],
        "maximumDiscount": 5,
        "promoCode": "FLASH33",
        "viewCount": 1250,
        "clickCount": 456,
        "purchaseCount": 67,
        "uniqueCustomers": 65,
    },
    {
        "store": "mcdonalds",
        "title": "Burger Bonanza",
        "description": "Double Whopper Combo - Get the ultimate burger experience at flash sale prices!",
        "image": "https://images.unsplash.com/photo-1568901346375-23c9450c58cd?w=400",
        "banner": "https://images.unsplash.com/photo-1568901346375-23c9450c58cd?w=800",
        "discountPercentage": 33,
        "priority": 9,
        "hours": 1,
        "maxQuantity": 50,
        "soldQuantity": 42,
        "limitPerUser": 2,
        "lowStockThreshold": 20,
        "originalPrice": 12,
        "flashSalePrice": 8,
        "status": FlashSaleStatus.ACTIVE.value,
        "termsAndConditions": [
            "Valid for delivery only",
            "Max 2 per customer",
            "While stocks last",
        ],
        "maximumDiscount": 4,
        "promoCode": "BKFLASH",
        "viewCount": 2100,
        "clickCount": 789,
        "purchaseCount": 42,
        "uniqueCustomers": 40,
    },
    {
        "store": "starbucks",
        "title": "Coffee Rush Hour",
        "description": "Any Grande Drink - Premium coffee at flash sale prices! Perfect for your morning boost.",
        "image": "https://images.unsplash.com/photo-1509042239860-f550ce710b93?w=400",
        "banner": "https://images.unsplash.com/photo-1509042239860-f550ce710b93?w=800",
        "discountPercentage": 33,
        "priority": 8,
        "hours": 0.5,
        "maxQuantity": 200,
        "soldQuantity": 156,
        "limitPerUser": 3,
        "lowStockThreshold": 25,
        "originalPrice": 6,
        "flashSalePrice": 4,
        "status": FlashSaleStatus.ENDING_SOON.value,
        "termsAndConditions": [
            "Valid on all Grande drinks",
            "In-store only",
            "One per customer per visit",
        ],
        "maximumDiscount": 2,
        "promoCode": "COFFEE33",
        "viewCount": 3400,
        "clickCount": 890,
        "purchaseCount": 156,
        "uniqueCustomers": 145,
    },
    {
        "store": "kfc",
        "title": "Crispy Chicken Special",
        "description": "8pc Bucket Meal - Finger-lickin good chicken at amazing flash sale prices!",
        "image": "https://images.unsplash.com/photo-1626645738196-c2a7c87a8f58?w=400",
        "banner": "https://images.unsplash.com/photo-1626645738196-c2a7c87a8f58?w=800",
        "discountPercentage": 33,
        "priority": 7,
        "hours": 3,
        "maxQuantity": 75,
        "soldQuantity": 23,
        "limitPerUser": 2,
        "lowStockThreshold": 20,
        "originalPrice": 18,
        "flashSalePrice": 12,
        "status": FlashSaleStatus.ACTIVE.value,
        "termsAndConditions": [
            "Valid for delivery and dine-in",
            "Cannot combine with other offers",
            "Subject to availability",
        ],
        "maximumDiscount": 6,
        "promoCode": "CRISPY33",
        "viewCount": 890,
        "clickCount": 234,
        "purchaseCount": 23,
        "uniqueCustomers": 22,
    },
]

# Promo codes backing the flash sales; "valid_days" counts from seeding time
PROMO_COUPONS = [
    {
        "store": "dominos",
        "couponCode": "FLASH33",
        "title": "Flash Pizza Deal - 33% Off",
        "description": "Get 33% off on our Flash Pizza Deal! Valid for Limited Time only.",
        "maxDiscountCap": 50,
        "valid_days": 7,
        "usageLimit": {"totalUsage": 1000, "perUser": 2, "usedCount": 67},
        "termsAndConditions": ["Valid on Flash Pizza Deal only", "Cannot be combined with other offers"],
        "tags": ["flash-sale", "pizza", "discount"],
        "imageUrl": "https://images.unsplash.com/photo-1565299624946-b28f40a0ae38?w=400",
        "isFeatured": True,
        "viewCount": 500,
        "claimCount": 200,
        "usageCount": 67,
    },
    {
        "store": "mcdonalds",
        "couponCode": "BKFLASH",
        "title": "Burger Bonanza - 33% Off",
        "description": "Get 33% off on our Burger Bonanza Deal! Limited time flash sale.",
        "maxDiscountCap": 40,
        "valid_days": 7,
        "usageLimit": {"totalUsage": 500, "perUser": 2, "usedCount": 42},
        "termsAndConditions": ["Valid on Burger Bonanza only", "Max 2 uses per customer", "Delivery orders only"],
        "tags": ["flash-sale", "burger", "discount"],
        "imageUrl": "https://images.unsplash.com/photo-1568901346375-23c9450c58cd?w=400",
        "isFeatured": True,
        "viewCount": 400,
        "claimCount": 150,
        "usageCount": 42,
    },
    {
        "store": "starbucks",
        "couponCode": "COFFEE33",
        "title": "Coffee Rush Hour - 33% Off",
        "description": "Get 33% off on any Grande drink at Starbucks!",
        "maxDiscountCap": 20,
        "valid_days": 3,
        "usageLimit": {"totalUsage": 2000, "perUser": 3, "usedCount": 156},
        "termsAndConditions": ["Valid on Grande drinks only", "In-store redemption only", "Max 3 uses per customer"],
        "tags": ["flash-sale", "coffee", "starbucks"],
        "imageUrl": "https://images.unsplash.com/photo-1509042239860-f550ce710b93?w=400",
        "isFeatured": False,
        "viewCount": 600,
        "claimCount": 300,
        "usageCount": 156,
    },
    {
        "store": "kfc",
        "couponCode": "CRISPY33",
        "title": "Crispy Chicken - 33% Off",
        "description": "Get 33% off on our 8pc Bucket Meal at KFC!",
        "maxDiscountCap": 60,
        "valid_days": 7,
        "usageLimit": {"totalUsage": 750, "perUser": 2, "usedCount": 23},
        "termsAndConditions": ["Valid on 8pc Bucket Meal only", "Max 2 uses per customer", "Valid for delivery and dine-in"],
        "tags": ["flash-sale", "chicken", "kfc"],
        "imageUrl": "https://images.unsplash.com/photo-1626645738196-c2a7c87a8f58?w=400",
        "isFeatured": False,
        "viewCount": 300,
        "claimCount": 100,
        "usageCount": 23,
    },
]

PROMO_COUPON_CODES = [coupon["couponCode"] for coupon in PROMO_COUPONS]

# "hours_ago" counts back from seeding time
FRIEND_REDEMPTIONS = [
    {
        "friendName": "Rahul S.",
        "friendAvatar": "https://randomuser.me/api/portraits/men/1.jpg",
        "offerTitle": "50% Off Pizza",
        "offerImage": "https://images.unsplash.com/photo-1565299624946-b28f40a0ae38?w=400",
        "storeName": "Dominos",
        "savings": 8.5,
        "cashbackPercentage": 15,
        "hours_ago": 2,
    },
    {
        "friendName": "Priya M.",
        "friendAvatar": "https://randomuser.me/api/portraits/women/2.jpg",
        "offerTitle": "Free Coffee",
        "offerImage": "https://images.unsplash.com/photo-1509042239860-f550ce710b93?w=400",
        "storeName": "Starbucks",
        "savings": 5.0,
        "cashbackPercentage": 20,
        "hours_ago": 4,
    },
    {
        "friendName": "Arjun K.",
        "friendAvatar": "https://randomuser.me/api/portraits/men/3.jpg",
        "offerTitle": "Burger Combo",
        "offerImage": "https://images.unsplash.com/photo-1568901346375-23c9450c58cd?w=400",
        "storeName": "Burger King",
        "savings": 6.0,
        "cashbackPercentage": 10,
        "hours_ago": 6,
    },
    {
        "friendName": "Sneha R.",
        "friendAvatar": "https://randomuser.me/api/portraits/women/4.jpg",
        "offerTitle": "Sushi Platter",
        "offerImage": "https://images.unsplash.com/photo-1579871494447-9811cf80d66c?w=400",
        "storeName": "Sushi Express",
        "savings": 12.0,
        "cashbackPercentage": 12,
        "hours_ago": 8,
    },
]

SAMPLE_USERS = [
    {"name": "Rahul S.", "email": "rahul@example.com", "phone": "+919111111111", "isVerified": True},
    {"name": "Priya M.", "email": "priya@example.com", "phone": "+919222222222", "isVerified": True},
    {"name": "Arjun K.", "email": "arjun@example.com", "phone": "+919333333333", "isVerified": True},
    {"name": "Sneha R.", "email": "sneha@example.com", "phone": "+919444444444", "isVerified": True},
]

ADMIN_USER = {
    "name": "Admin User",
    "email": "admin@rez.com",
    "phone": "+919999999999",
    "isAdmin": True,
    "isVerified": True,
}

EXCLUSIVE_OFFERS = [
    {
        "title": "Student Special",
        "icon": "🎓",
        "discount": "25% Extra Off",
        "description": "Valid student ID required",
        "color": "#3B82F6",
        "gradient": ["#3B82F6", "#1D4ED8"],
        "targetAudience": TargetAudience.STUDENT.value,
    },
    {
        "title": "Women Exclusive",
        "icon": "👩",
        "discount": "Up to 40% Off",
        "description": "Celebrate every day",
        "color": "#EC4899",
        "gradient": ["#EC4899", "#BE185D"],
        "targetAudience": TargetAudience.WOMEN.value,
    },
    {
        "title": "Birthday Month",
        "icon": "🎂",
        "discount": "30% Off + Gift",
        "description": "Celebrate with extra savings",
        "color": "#F59E0B",
        "gradient": ["#F59E0B", "#D97706"],
        "targetAudience": TargetAudience.BIRTHDAY.value,
    },
    {
        "title": "Corporate Perks",
        "icon": "🏢",
        "discount": "20% Off",
        "description": "For verified employees",
        "color": "#64748B",
        "gradient": ["#64748B", "#475569"],
        "targetAudience": TargetAudience.CORPORATE.value,
    },
    {
        "title": "First Order",
        "icon": "🎁",
        "discount": "Flat 50% Off",
        "description": "Welcome to Rez!",
        "color": "#10B981",
        "gradient": ["#10B981", "#059669"],
        "targetAudience": TargetAudience.FIRST.value,
    },
    {
        "title": "Senior Citizens",
        "icon": "👴",
        "discount": "15% Extra Off",
        "description": "Age 60+ special discount",
        "color": "#8B5CF6",
        "gradient": ["#8B5CF6", "#6D28D9"],
        "targetAudience": TargetAudience.SENIOR.value,
    },
]

# Fallback for social proof stats when a category has no trending hashtags
DEFAULT_TOP_HASHTAGS = ["#Trending", "#BestDeals", "#Cashback"]
