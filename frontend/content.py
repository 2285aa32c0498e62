"""Static marketing content shown on the public pages."""

TESTIMONIALS = [
    {
        "customer_name": "John & Emily Smith",
        "location": "New York, USA",
        "rating": 5,
        "review": "Our honeymoon in Bali was absolutely magical! The team organized everything perfectly.",
        "tour_title": "Magical Bali Adventure",
        "travel_date": "2024-12-01",
    },
    {
        "customer_name": "Maria Rodriguez",
        "location": "Madrid, Spain",
        "rating": 5,
        "review": "Santorini exceeded all expectations. The sunset views were breathtaking!",
        "tour_title": "Santorini Romantic Getaway",
        "travel_date": "2024-11-15",
    },
    {
        "customer_name": "Kenji Watanabe",
        "location": "Osaka, Japan",
        "rating": 4,
        "review": "Seeing the Great Migration from a balloon was the highlight of my life.",
        "tour_title": "Safari Adventure Kenya",
        "travel_date": "2024-09-02",
    },
]

FAQS = [
    {
        "question": "How do I make a booking?",
        "answer": "You can make a booking through our website, by calling us, or visiting our office.",
        "category": "Booking",
    },
    {
        "question": "What payment methods do you accept?",
        "answer": "We accept credit cards, bank transfers, and PayPal payments.",
        "category": "Payment",
    },
    {
        "question": "Can I cancel my booking?",
        "answer": "Yes, cancellations are allowed according to our cancellation policy.",
        "category": "Cancellation",
    },
]

SERVICES = [
    {
        "name": "Visa Assistance",
        "icon": "📄",
        "description": "Complete visa application support and documentation",
        "features": ["Document verification", "Application submission", "Status tracking"],
        "starting_price": 50,
    },
    {
        "name": "Travel Insurance",
        "icon": "🛡️",
        "description": "Comprehensive travel insurance coverage",
        "features": ["Medical coverage", "Trip cancellation", "24/7 support"],
        "starting_price": 25,
    },
    {
        "name": "Flight Booking",
        "icon": "✈️",
        "description": "Best deals on international and domestic flights",
        "features": ["Price comparison", "Flexible dates", "Seat selection"],
    },
    {
        "name": "Hotel Booking",
        "icon": "🏨",
        "description": "Accommodation booking worldwide",
        "features": ["Best rates", "Free cancellation", "Quality assurance"],
    },
]

CONTACT_INFO = {
    "email": "info@wanderlusttravel.com",
    "phone": "+1 (555) 123-4567",
    "whatsapp": "+1 (555) 123-4567",
    "address": "123 Travel Street, New York, NY 10001, USA",
    "business_hours": {
        "weekdays": "9:00 AM - 6:00 PM",
        "weekends": "10:00 AM - 4:00 PM",
    },
    "social_media": {
        "Facebook": "https://facebook.com/wanderlusttravel",
        "Instagram": "https://instagram.com/wanderlusttravel",
        "Twitter": "https://twitter.com/wanderlusttravel",
        "YouTube": "https://youtube.com/wanderlusttravel",
    },
}

COMPANY_STATS = [
    ("10,000+", "Happy Travelers"),
    ("4.9", "Average Rating"),
    ("150+", "Destinations"),
    ("24/7", "Customer Support"),
]

COMPANY_VALUES = [
    ("Trust & Reliability", "We build lasting relationships through transparency and dependable service."),
    ("Excellence", "We strive for perfection in every aspect of your travel experience."),
    ("Customer First", "Your satisfaction and happiness are at the heart of everything we do."),
    ("Innovation", "We continuously evolve to provide cutting-edge travel solutions."),
]

MILESTONES = [
    ("2015", "Company Founded", "Started with a vision to make travel accessible to everyone"),
    ("2017", "First 1000 Customers", "Reached our first major milestone in customer satisfaction"),
    ("2019", "International Expansion", "Expanded services to cover 50+ countries worldwide"),
    ("2021", "Digital Innovation", "Launched our advanced booking platform and mobile app"),
    ("2023", "10,000+ Happy Travelers", "Celebrated serving over 10,000 satisfied customers"),
    ("2025", "Sustainable Travel Initiative", "Leading the industry in eco-friendly travel solutions"),
]
