def make_recipe_data(**overrides):
    data = {
        "name": "Pizza Margherita",
        "ingredients": "Dough\nTomatoes\nMozzarella\nBasil",
        "instructions": "1. Stretch the dough.\n2. Top it.\n3. Bake.",
        "location_lat": 40.8358,
        "location_lng": 14.2488,
        "location_name": "Naples, Italy",
        "city": "Naples",
        "country": "Italy",
    }
    data.update(overrides)
    return data


def user_headers(user):
    return {"X-User-Id": str(user.id)}
