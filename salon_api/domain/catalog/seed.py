"""Salon services the catalog starts with"""

from ...models import Product

SEED_PRODUCTS = [
    Product(
        id=1,
        name="Braids & Cornrows",
        price=150,
        duration=180,
        image="https://images.unsplash.com/photo-1522337360788-8b13dee7a37e?w=400",
        description="Authentic African braiding styles including cornrows, box braids, and creative patterns. Perfect for protective styling.",
        category="Braids",
    ),
    Product(
        id=2,
        name="Weave Installation",
        price=200,
        duration=150,
        image="https://images.unsplash.com/photo-1560066984-138dadb4c035?w=400",
        description="Professional weave installation using premium hair extensions for a natural, flawless look.",
        category="Weaves",
    ),
    Product(
        id=3,
        name="Wig Installation",
        price=120,
        duration=90,
        image="https://images.unsplash.com/photo-1583834666451-f15d8d922ff1?w=400",
        description="Custom wig installation with lace melting and styling for an undetectable, natural appearance.",
        category="Wigs",
    ),
    Product(
        id=4,
        name="Dreadlocs/Sister Locs",
        price=250,
        duration=240,
        image="https://images.unsplash.com/photo-1580618672591-eb180b1a973f?w=400",
        description="Expert loc installation and maintenance including sister locs, traditional locs, and retwisting services.",
        category="Locs",
    ),
    Product(
        id=5,
        name="Natural Hair Styling",
        price=80,
        duration=90,
        image="https://images.unsplash.com/photo-1522337660859-02fbefca4702?w=400",
        description="Beautiful natural hairstyles including twist outs, braid outs, wash and go, and updos.",
        category="Natural Hair",
    ),
    Product(
        id=6,
        name="Hair Coloring",
        price=180,
        duration=150,
        image="https://images.unsplash.com/photo-1492106087820-71f1a00d2b11?w=400",
        description="Professional hair coloring services including highlights, balayage, full color, and color correction.",
        category="Color",
    ),
    Product(
        id=7,
        name="Silk Press",
        price=100,
        duration=120,
        image="https://images.unsplash.com/photo-1521590832167-7bcbfaa6381f?w=400",
        description="Heat-free silk press for smooth, straight hair while maintaining hair health and natural texture.",
        category="Styling",
    ),
    Product(
        id=8,
        name="Hair Treatment",
        price=60,
        duration=60,
        image="https://images.unsplash.com/photo-1519699047748-de8e457a634e?w=400",
        description="Deep conditioning treatments, protein treatments, and scalp treatments for optimal hair health.",
        category="Treatment",
    ),
]
