"""Sample catalog: packages, materials and completed projects."""

from buildmyhome.extensions import db
from buildmyhome.models import Material, Package, Project


_UNSPLASH = 'https://images.unsplash.com/{photo}?ixlib=rb-1.2.1&auto=format&fit=crop&w={w}&h={h}&q=80'


def _image(photo, w=600, h=400):
    return _UNSPLASH.format(photo=photo, w=w, h=h)


SAMPLE_PACKAGES = [
    {
        'name': 'Modern 2BHK Villa',
        'name_hindi': 'आधुनिक 2BHK विला',
        'description': 'A contemporary 2BHK villa with open floor plan, premium finishes and modern amenities.',
        'description_hindi': 'ओपन फ्लोर प्लान, प्रीमियम फिनिश और आधुनिक सुविधाओं के साथ एक समकालीन 2BHK विला।',
        'size': 1200,
        'bedrooms': 2,
        'bathrooms': 2,
        'price': 2500000,
        'style': 'modern',
        'popular': True,
        'premium': False,
        'budget': False,
        'image_url': _image('photo-1600585154340-be6161a56a0c'),
    },
    {
        'name': 'Luxury 3BHK Villa',
        'name_hindi': 'लक्जरी 3BHK विला',
        'description': 'A luxurious 3BHK villa with high ceilings, premium materials, and spacious rooms.',
        'description_hindi': 'ऊंची छतों, प्रीमियम सामग्रियों और विशाल कमरों के साथ एक शानदार 3BHK विला।',
        'size': 1800,
        'bedrooms': 3,
        'bathrooms': 3,
        'price': 3800000,
        'style': 'contemporary',
        'popular': False,
        'premium': True,
        'budget': False,
        'image_url': _image('photo-1564013799919-ab600027ffc6'),
    },
    {
        'name': 'Compact 1BHK Home',
        'name_hindi': 'कॉम्पैक्ट 1BHK होम',
        'description': 'A smart and efficient 1BHK home with modern amenities and quality finishes.',
        'description_hindi': 'आधुनिक सुविधाओं और गुणवत्तापूर्ण फिनिश के साथ एक स्मार्ट और कुशल 1BHK घर।',
        'size': 600,
        'bedrooms': 1,
        'bathrooms': 1,
        'price': 1500000,
        'style': 'minimalist',
        'popular': False,
        'premium': False,
        'budget': True,
        'image_url': _image('photo-1580587771525-78b9dba3b914'),
    },
]

SAMPLE_MATERIALS = [
    {
        'name': 'Italian Marble',
        'name_hindi': 'इटालियन मार्बल',
        'category': 'flooring',
        'description': 'Premium Italian marble for elegant flooring solutions.',
        'description_hindi': 'सुरुचिपूर्ण फर्श समाधान के लिए प्रीमियम इटालियन संगमरमर।',
        'premium': True,
        'image_url': _image('photo-1615529328331-f8917597711f', 500, 300),
    },
    {
        'name': 'Engineered Wood',
        'name_hindi': 'इंजीनियर्ड वुड',
        'category': 'flooring',
        'description': 'Durable engineered wood flooring for a warm, natural look.',
        'description_hindi': 'गर्म, प्राकृतिक लुक के लिए टिकाऊ इंजीनियर्ड वुड फ्लोरिंग।',
        'premium': False,
        'image_url': _image('photo-1620641622500-696fc056faf2', 500, 300),
    },
    {
        'name': 'Granite Countertop',
        'name_hindi': 'ग्रेनाइट काउंटरटॉप',
        'category': 'kitchen',
        'description': 'Premium granite countertops for kitchen surfaces.',
        'description_hindi': 'रसोई की सतहों के लिए प्रीमियम ग्रेनाइट काउंटरटॉप।',
        'premium': True,
        'image_url': _image('photo-1622128979476-c1c303cc05cd', 500, 300),
    },
    {
        'name': 'Designer Tiles',
        'name_hindi': 'डिजाइनर टाइल्स',
        'category': 'bathroom',
        'description': 'Stylish designer tiles for bathroom and kitchen spaces.',
        'description_hindi': 'बाथरूम और रसोई के स्थानों के लिए स्टाइलिश डिजाइनर टाइल।',
        'premium': False,
        'image_url': _image('photo-1609235435104-943084ab3d68', 500, 300),
    },
    {
        'name': 'Textured Paint',
        'name_hindi': 'टेक्सचर्ड पेंट',
        'category': 'walls',
        'description': 'Elegant textured paint for distinctive wall finishes.',
        'description_hindi': 'विशिष्ट दीवार फिनिश के लिए सुरुचिपूर्ण टेक्सचर्ड पेंट।',
        'premium': True,
        'image_url': _image('photo-1583364444622-8d3ebdfe38dc', 500, 300),
    },
    {
        'name': 'Hardwood Doors',
        'name_hindi': 'हार्डवुड दरवाजे',
        'category': 'doors',
        'description': 'Premium hardwood doors for elegance and durability.',
        'description_hindi': 'सुरुचि और टिकाऊपन के लिए प्रीमियम हार्डवुड दरवाजे।',
        'premium': True,
        'image_url': _image('photo-1513694203232-719a280e022f', 500, 300),
    },
]

SAMPLE_PROJECTS = [
    {
        'title': 'Modern Villa, Delhi',
        'title_hindi': 'आधुनिक विला, दिल्ली',
        'subtitle': '3BHK Luxury Home',
        'subtitle_hindi': '3BHK लक्जरी होम',
        'description': 'A contemporary design with open floor plan, large windows and premium finishes throughout.',
        'description_hindi': 'ओपन फ्लोर प्लान, बड़ी खिड़कियों और प्रीमियम फिनिश के साथ एक समकालीन डिज़ाइन।',
        'completed': True,
        'location': 'Delhi',
        'image_url': _image('photo-1580913428023-02c695666d61'),
    },
    {
        'title': 'Traditional Home, Mumbai',
        'title_hindi': 'पारंपरिक घर, मुंबई',
        'subtitle': '4BHK Family House',
        'subtitle_hindi': '4BHK फैमिली हाउस',
        'description': (
            'A blend of traditional elements with modern amenities, featuring spacious rooms and elegant detailing.'
        ),
        'description_hindi': 'आधुनिक सुविधाओं के साथ पारंपरिक तत्वों का मिश्रण, विशाल कमरों और सुंदर डिटेलिंग के साथ।',
        'completed': True,
        'location': 'Mumbai',
        'image_url': _image('photo-1598228723793-52759bba239c'),
    },
    {
        'title': 'Minimalist Home, Bangalore',
        'title_hindi': 'मिनिमलिस्ट होम, बैंगलोर',
        'subtitle': '2BHK Smart Home',
        'subtitle_hindi': '2BHK स्मार्ट होम',
        'description': 'A minimalist design focused on functionality and clean aesthetics with smart home integration.',
        'description_hindi': 'स्मार्ट होम इंटीग्रेशन के साथ कार्यक्षमता और साफ सौंदर्य पर केंद्रित एक मिनिमलिस्ट डिज़ाइन।',
        'completed': True,
        'location': 'Bangalore',
        'image_url': _image('photo-1600607687939-ce8a6c25118c'),
    },
]


def seed_catalog():
    """Insert sample rows that are not present yet. Returns counts per table."""
    created = {'packages': 0, 'materials': 0, 'projects': 0}

    for data in SAMPLE_PACKAGES:
        if Package.query.filter_by(name=data['name']).first() is None:
            db.session.add(Package(**data))
            # Slug uniqueness is checked against the database.
            db.session.flush()
            created['packages'] += 1

    for data in SAMPLE_MATERIALS:
        if Material.query.filter_by(name=data['name'], category=data['category']).first() is None:
            db.session.add(Material(**data))
            created['materials'] += 1

    for data in SAMPLE_PROJECTS:
        if Project.query.filter_by(title=data['title']).first() is None:
            db.session.add(Project(**data))
            created['projects'] += 1

    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return created
