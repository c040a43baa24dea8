from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Account',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.TextField(verbose_name='Name')),
                ('email', models.CharField(db_index=True, max_length=254, verbose_name='Email')),
                ('password_hash', models.CharField(max_length=128, verbose_name='Password hash')),
                ('phone_number', models.CharField(max_length=32, verbose_name='Phone number')),
                ('terms_accepted', models.BooleanField(blank=True, null=True, verbose_name='Accepted terms')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created')),
            ],
            options={
                'verbose_name': 'Account',
                'verbose_name_plural': 'Accounts',
                'ordering': ['-created_at'],
            },
        ),
    ]
